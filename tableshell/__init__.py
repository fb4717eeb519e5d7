# ==============================================
# tableshell: Interactive Table Shell
# ==============================================
#
# Package Structure (4 Topics + Shell):
#
# tableshell/
# ├── storage/        # Topic 1: In-memory Store / Table / Row model
# ├── parsing/        # Topic 2: Classify, tokenize and parse statements
# ├── execution/      # Topic 3: Create / Insert / Select / Drop executors
# ├── persistence/    # Topic 4: JSON snapshot across restarts
# ├── config.py       # Configuration management
# ├── errors.py       # Exception taxonomy
# ├── shell.py        # Read-eval-print loop
# └── cli.py          # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
