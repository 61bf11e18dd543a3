"""Exit codes used by the jobwire CLI."""

SUCCESS_EXIT_CODE = 0
VALIDATION_EXIT_CODE = 2
