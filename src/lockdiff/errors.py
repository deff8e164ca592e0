class LockDiffError(RuntimeError):
    """
    Base class for all fatal errors raised while comparing lock files.
    """


class ConfigurationError(LockDiffError):
    pass


class ReferenceNotFoundError(LockDiffError):
    def __init__(self, reference: str) -> None:
        super().__init__(f"Git reference not found: {reference}")
        self.reference = reference


class ManifestMissingError(LockDiffError):
    def __init__(self, reference: str, lock_file: str) -> None:
        super().__init__(f"{lock_file} does not exist at git reference {reference}")
        self.reference = reference
        self.lock_file = lock_file


class InvalidManifestError(LockDiffError):
    def __init__(self, reference: str, reason: str) -> None:
        super().__init__(f"Lock file at {reference} could not be read: {reason}")
        self.reference = reference


class InsufficientReferencesError(LockDiffError):
    pass


class AmbiguousReferenceError(LockDiffError):
    pass


class GitCommandError(LockDiffError):
    pass


class OutputPathError(LockDiffError):
    pass
