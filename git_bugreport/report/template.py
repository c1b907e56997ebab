"""Questions shown to the reporter at the top of every report."""

BUG_TEMPLATE = (
    "Thank you for filling out a Git bug report!\n"
    "Please answer the following questions to help us understand your issue.\n"
    "\n"
    "What did you do before the bug happened? (Steps to reproduce your issue)\n"
    "\n"
    "What did you expect to happen? (Expected behavior)\n"
    "\n"
    "What happened instead? (Actual behavior)\n"
    "\n"
    "What's different between what you expected and what actually happened?\n"
    "\n"
    "Anything else you want to add:\n"
    "\n"
    "Please review the rest of the bug report below.\n"
    "You can delete any lines you don't wish to send.\n"
)
