"""Errors returned by Amazon RDS. Wire codes drop the ``Fault`` suffix."""

from awsmodels.exceptions import ServiceError


class AmazonRDSException(ServiceError):
    """Base for RDS errors."""


class DBSnapshotNotFoundFault(AmazonRDSException):
    """The snapshot identifier does not refer to an existing DB snapshot."""

    error_code = "DBSnapshotNotFound"


class InvalidDBSnapshotStateFault(AmazonRDSException):
    """The state of the DB snapshot does not allow deletion."""

    error_code = "InvalidDBSnapshotState"


EXCEPTIONS = (DBSnapshotNotFoundFault, InvalidDBSnapshotStateFault)
