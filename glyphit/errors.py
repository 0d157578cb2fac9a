"""Exception hierarchy for glyphit operations.

Every failure coming out of GitPython is wrapped into one of these classes
before it reaches the caller. Nothing here is retried.
"""


class GlyphitError(Exception):
    """Base class for all glyphit errors."""


class ConfigurationError(GlyphitError):
    """Raised when the glyphit configuration or emoji catalog is unusable."""


class RepositoryNotFound(GlyphitError):
    """No git repository could be discovered from the starting directory."""


class StagingError(GlyphitError):
    """Base class for failures while adding files to the index."""


class IndexAccessError(StagingError):
    pass


class AddFailure(StagingError):
    pass


class IndexWriteError(StagingError):
    pass


class PromptAborted(GlyphitError):
    """The operator interrupted the interactive message flow."""


class SelectionAborted(PromptAborted):
    """The operator cancelled the emoji menu."""


class CommitError(GlyphitError):
    """Base class for failures while creating a commit."""


class IdentityMissing(CommitError):
    pass


class CommitAborted(CommitError):
    pass


class TreeWriteError(CommitError):
    pass


class CommitCreationError(CommitError):
    pass


class PushError(GlyphitError):
    """Base class for failures while pushing to the remote."""


class DetachedOrUnbornHead(PushError):
    pass


class RemoteResolutionError(PushError):
    """The push target could not be resolved from the configuration."""


class NoRemoteConfigured(RemoteResolutionError):
    pass


class RemoteNotFound(RemoteResolutionError):
    pass


class PushRejected(PushError):
    pass
