__all__ = ["engine", "groups", "report"]

import lockdiff.diff.engine as engine
import lockdiff.diff.groups as groups
import lockdiff.diff.report as report
