"""Domain errors raised by the voting services.

Each error carries a stable ``code`` for API clients, a default
human-readable message, and the HTTP status the API layer maps it to.
"""
from showcase.core import constants


class VoteError(Exception):
    code = constants.VOTE_FAILED
    status_code = 500
    default_message = "Failed to handle vote"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ProjectNotFoundError(VoteError):
    code = constants.PROJECT_NOT_FOUND
    status_code = 404
    default_message = "Project not found"


class ProjectNotApprovedError(VoteError):
    code = constants.PROJECT_NOT_APPROVED
    status_code = 403
    default_message = "Only approved projects can receive votes"


class SelfVoteError(VoteError):
    code = constants.CANNOT_VOTE_OWN_PROJECT
    status_code = 403
    default_message = "You cannot vote for your own project"


class UserNotFoundError(VoteError):
    code = constants.USER_NOT_FOUND
    status_code = 404
    default_message = "User not found"


class VotingClosedError(VoteError):
    code = constants.VOTING_CLOSED
    status_code = 403
    default_message = "Voting has ended"


class VoteStoreError(VoteError):
    """The store rejected or lost the transaction; nothing was applied."""
