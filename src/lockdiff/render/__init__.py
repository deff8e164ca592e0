__all__ = ["console", "files"]

import lockdiff.render.console as console
import lockdiff.render.files as files
