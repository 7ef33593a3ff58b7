"""Tests for protected filename matching."""

from twig.utils.ignore import ProtectedPattern, ProtectedMatcher, get_protected_matcher


class TestProtectedPattern:
    """Tests for individual protected patterns."""

    def test_simple_name_matches_any_directory(self):
        pattern = ProtectedPattern("Makefile")
        assert pattern.matches("Makefile")
        assert pattern.matches("sub/Makefile")
        assert not pattern.matches("Makefile.bak")

    def test_wildcard(self):
        pattern = ProtectedPattern("*.lock")
        assert pattern.matches("poetry.lock")
        assert pattern.matches("dir/yarn.lock")
        assert not pattern.matches("lockfile")

    def test_pattern_with_slash_matches_full_path(self):
        pattern = ProtectedPattern("build/out.txt")
        assert pattern.matches("build/out.txt")
        assert not pattern.matches("other/build/out.txt")

    def test_leading_slash_is_anchored(self):
        pattern = ProtectedPattern("/top.txt")
        assert pattern.matches("top.txt")
        assert not pattern.matches("sub/top.txt")


class TestProtectedMatcher:
    """Tests for the pattern set."""

    def test_empty_matcher(self):
        assert not ProtectedMatcher().is_protected("anything")

    def test_comments_and_blank_lines_skipped(self):
        matcher = ProtectedMatcher()
        matcher.add_patterns(["", "# comment", "  *.tmp  "])
        assert len(matcher.patterns) == 1
        assert matcher.is_protected("x.tmp")

    def test_normalizes_paths(self):
        matcher = ProtectedMatcher()
        matcher.add_pattern("dir/file")
        assert matcher.is_protected("./dir/file")
        assert matcher.is_protected("dir\\file")

    def test_load_file(self, temp_dir):
        protect_file = temp_dir / '.twigprotect'
        protect_file.write_text("secret.txt\n*.key\n")
        matcher = ProtectedMatcher()
        assert matcher.load_file(protect_file)
        assert matcher.is_protected("secret.txt")
        assert matcher.is_protected("id.key")

    def test_load_missing_file(self, temp_dir):
        assert not ProtectedMatcher().load_file(temp_dir / 'absent')


def test_repository_matcher_defaults_to_makefile(repo):
    matcher = get_protected_matcher(repo)
    assert matcher.is_protected("Makefile")
    assert not matcher.is_protected("README")


def test_repository_matcher_reads_config_and_protect_file(repo):
    repo.config_file.write_text("[core]\nprotected = Makefile, notes.txt\n")
    (repo.work_tree / '.twigprotect').write_text("*.local\n")
    matcher = get_protected_matcher(repo)
    assert matcher.is_protected("notes.txt")
    assert matcher.is_protected("settings.local")


def test_repository_matcher_env_override(repo, monkeypatch):
    monkeypatch.setenv('TWIG_CORE_PROTECTED', 'only.txt')
    matcher = get_protected_matcher(repo)
    assert matcher.is_protected("only.txt")
    assert not matcher.is_protected("Makefile")
