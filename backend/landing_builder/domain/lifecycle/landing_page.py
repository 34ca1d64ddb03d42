from typing import Dict, Tuple

DRAFT = "draft"
PUBLISHED = "published"

# (current state, action) -> next state
LANDING_PAGE_TRANSITIONS: Dict[Tuple[str, str], str] = {
    (DRAFT, "publish"): PUBLISHED,
    (PUBLISHED, "publish"): PUBLISHED,   # re-publish keeps its own slug
    (PUBLISHED, "unpublish"): DRAFT,
}

def state_of(published: bool) -> str:
    return PUBLISHED if published else DRAFT

def next_landing_page_state(*, from_state: str, action: str) -> str:
    """
    Guards landing page lifecycle transitions.
    Single source of truth for published-flag changes.
    """
    try:
        return LANDING_PAGE_TRANSITIONS[(from_state, action)]
    except KeyError:
        raise ValueError(
            f"Illegal landing page transition: {action} from {from_state}"
        ) from None
