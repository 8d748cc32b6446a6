from ...domain.exceptions import AtomFeedError


class AtomFeedInfrastructureError(AtomFeedError):
    pass


class FeedDocumentError(AtomFeedInfrastructureError):
    pass
