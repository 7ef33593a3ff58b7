"""CLI commands for Twig."""

from twig.cli.commands.init import init_cmd
from twig.cli.commands.add import add_cmd, rm_cmd
from twig.cli.commands.commit import commit_cmd
from twig.cli.commands.log import log_cmd, global_log_cmd, find_cmd
from twig.cli.commands.status import status_cmd
from twig.cli.commands.checkout import checkout_cmd
from twig.cli.commands.branch import branch_cmd, rm_branch_cmd
from twig.cli.commands.reset import reset_cmd
from twig.cli.commands.merge import merge_cmd
from twig.cli.commands.remote import add_remote_cmd, rm_remote_cmd, remotes_cmd
from twig.cli.commands.push import push_cmd
from twig.cli.commands.fetch import fetch_cmd
from twig.cli.commands.pull import pull_cmd

__all__ = ['init_cmd', 'add_cmd', 'rm_cmd', 'commit_cmd', 'log_cmd', 'global_log_cmd',
           'find_cmd', 'status_cmd', 'checkout_cmd', 'branch_cmd', 'rm_branch_cmd',
           'reset_cmd', 'merge_cmd', 'add_remote_cmd', 'rm_remote_cmd', 'remotes_cmd',
           'push_cmd', 'fetch_cmd', 'pull_cmd']
