"""Exception hierarchy for Twig.

Every error raised by the core derives from TwigError and carries the
message shown to the user. The CLI prints that message and exits.
"""


class TwigError(Exception):
    """Base class for all Twig errors."""


class NotFoundError(TwigError):
    """A commit, object, branch, file or remote could not be found."""


class InvalidStateError(TwigError):
    """The repository is not in a state that allows the operation."""


class ConflictError(TwigError):
    """The operation would clobber work that Twig does not track."""


class UsageError(TwigError):
    """Bad arguments."""


class NotARepositoryError(NotFoundError):
    def __init__(self, message: str = "Not in an initialized Twig directory."):
        super().__init__(message)


class ObjectNotFoundError(NotFoundError):
    def __init__(self, digest: str):
        super().__init__(f"Object {digest} not found.")
        self.digest = digest


class CommitNotFoundError(NotFoundError):
    def __init__(self, message: str = "No commit with that id exists."):
        super().__init__(message)


class BranchNotFoundError(NotFoundError):
    def __init__(self, message: str = "A branch with that name does not exist."):
        super().__init__(message)


class WorkingFileNotFoundError(NotFoundError):
    def __init__(self, message: str = "File does not exist."):
        super().__init__(message)


class FileNotInCommitError(NotFoundError):
    def __init__(self, message: str = "File does not exist in that commit."):
        super().__init__(message)


class RemoteNotFoundError(NotFoundError):
    def __init__(self, message: str = "A remote with that name does not exist."):
        super().__init__(message)


class RepositoryExistsError(InvalidStateError):
    def __init__(self, message: str = (
            "A Twig version-control system already exists in the current directory.")):
        super().__init__(message)


class NoChangesError(InvalidStateError):
    def __init__(self, message: str = "No changes added to the commit."):
        super().__init__(message)


class NothingToRemoveError(InvalidStateError):
    def __init__(self, message: str = "No reason to remove the file."):
        super().__init__(message)


class BranchExistsError(InvalidStateError):
    def __init__(self, message: str = "A branch with that name already exists."):
        super().__init__(message)


class ActiveBranchError(InvalidStateError):
    def __init__(self, message: str = "Cannot remove the current branch."):
        super().__init__(message)


class SelfMergeError(InvalidStateError):
    def __init__(self, message: str = "Cannot merge a branch with itself."):
        super().__init__(message)


class UncommittedChangesError(InvalidStateError):
    def __init__(self, message: str = "You have uncommitted changes."):
        super().__init__(message)


class NoCommonAncestorError(InvalidStateError):
    def __init__(self, message: str = "Branches share no common history."):
        super().__init__(message)


class RemoteExistsError(InvalidStateError):
    def __init__(self, message: str = "A remote with that name already exists."):
        super().__init__(message)


class PushRejectedError(InvalidStateError):
    def __init__(self, message: str = "Please pull down remote changes before pushing."):
        super().__init__(message)


class CorruptObjectError(InvalidStateError):
    """A stored object has an invalid header, size or type."""


class CorruptIndexError(InvalidStateError):
    """The index file failed its signature or checksum check."""


class UntrackedFileConflictError(ConflictError):
    def __init__(self, message: str = (
            "There is an untracked file in the way; "
            "delete it, or add and commit it first.")):
        super().__init__(message)


class InvalidBranchNameError(UsageError):
    def __init__(self, name: str):
        super().__init__(f"'{name}' is not a valid branch name.")
