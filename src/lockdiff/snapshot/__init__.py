__all__ = ["core"]

import lockdiff.snapshot.core as core
