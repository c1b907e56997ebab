"""Hooks installed in the repository."""

from .base import CollectionContext, Collector

NOT_IN_REPOSITORY = "not run from a git repository - no hooks to show"

# Hooks git knows how to run, in the order githooks(5) documents them. There
# is no way to ask git for this list.
HOOK_NAMES = (
    "applypatch-msg",
    "pre-applypatch",
    "post-applypatch",
    "pre-commit",
    "pre-merge-commit",
    "prepare-commit-msg",
    "commit-msg",
    "post-commit",
    "pre-rebase",
    "post-checkout",
    "post-merge",
    "pre-push",
    "pre-receive",
    "update",
    "proc-receive",
    "post-receive",
    "post-update",
    "reference-transaction",
    "push-to-checkout",
    "pre-auto-gc",
    "post-rewrite",
    "sendemail-validate",
    "fsmonitor-watchman",
    "p4-changelist",
    "p4-prepare-changelist",
    "p4-post-changelist",
    "p4-pre-submit",
    "post-index-change",
)


class HooksCollector(Collector):
    """Names of the known hooks that are present and executable."""

    title = "Configured Hooks"

    def __init__(self, hook_names=HOOK_NAMES):
        self.hook_names = tuple(hook_names)

    def collect(self, context: CollectionContext) -> str:
        if context.repository is None:
            return NOT_IN_REPOSITORY + "\n"

        return "".join(
            f"{name}\n"
            for name in self.hook_names
            if context.repository.find_hook(name) is not None
        )
