from .deadline import ensure_voting_open, get_deadline_status
from .identity import (
    AnonymousIdentity,
    AuthenticatedIdentity,
    Identity,
    ResolvedIdentity,
    persist_visitor_cookie,
    resolve_identity,
)
from .project_gate import ProjectGate, get_project_gate
from .projects import (
    annotate_has_voted,
    delete_project,
    get_project,
    list_projects,
    list_user_favorites,
    set_project_approval,
)
from .vote import VoteResult, toggle_vote

__all__ = [
    # deadline
    "ensure_voting_open",
    "get_deadline_status",
    # identity
    "AnonymousIdentity",
    "AuthenticatedIdentity",
    "Identity",
    "ResolvedIdentity",
    "persist_visitor_cookie",
    "resolve_identity",
    # project gate
    "ProjectGate",
    "get_project_gate",
    # projects
    "annotate_has_voted",
    "delete_project",
    "get_project",
    "list_projects",
    "list_user_favorites",
    "set_project_approval",
    # votes
    "VoteResult",
    "toggle_vote",
]
