"""Role selection logic for the self-assignable, proficiency and colour menus."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable

__all__ = [
    "RoleSelectionError",
    "RoleAction",
    "RoleToggle",
    "ROLE_ID_FLUENT",
    "ROLE_ID_NATIVE",
    "ROLE_ID_ADVANCED",
    "ROLE_ID_INTERMEDIATE",
    "ROLE_ID_BEGINNER",
    "ROLE_ID_ELEMENTARY",
    "ROLE_ID_UPPER_INTERMEDIATE",
    "ROLE_ID_NON_LEARNER",
    "ROLE_ID_CYPRUS",
    "ROLE_ID_POLL",
    "ROLE_ID_BOOSTER",
    "VALID_TOGGLE_ROLES",
    "PROFICIENCY_ROLES",
    "COLOR_ROLES",
    "toggle_role",
    "proficiency_roles",
    "booster_roles",
]

ROLE_ID_FLUENT = 350483489461895168
ROLE_ID_NATIVE = 350483752490631181
ROLE_ID_ADVANCED = 350485279238258689
ROLE_ID_INTERMEDIATE = 350485376109903882
ROLE_ID_BEGINNER = 351117824300679169
ROLE_ID_ELEMENTARY = 351117954974482435
ROLE_ID_UPPER_INTERMEDIATE = 351118486426091521
ROLE_ID_NON_LEARNER = 352001527780474881
ROLE_ID_CYPRUS = 1247132108686884894

ROLE_ID_POLL = 650330610358943755
ROLE_ID_BOOSTER = 593038680608735233

VALID_TOGGLE_ROLES = frozenset({
    357714047698993162,  # Gamer
    469239964119597056,  # Student
    481544681520365577,  # IPA Literate
    637359870009409576,  # Dialect
    649313942002466826,  # Word of the day
    683443550410506273,  # Events
    762747975164100608,  # Heritage speaker
    800464173385515058,  # Linguistics Reading
    886625423167979541,  # VCer
    928364890601685033,  # Book Club
})

PROFICIENCY_ROLES = frozenset({
    ROLE_ID_FLUENT,
    ROLE_ID_NATIVE,
    ROLE_ID_ADVANCED,
    ROLE_ID_INTERMEDIATE,
    ROLE_ID_BEGINNER,
    ROLE_ID_ELEMENTARY,
    ROLE_ID_UPPER_INTERMEDIATE,
    ROLE_ID_NON_LEARNER,
    ROLE_ID_CYPRUS,
})

COLOR_ROLES = frozenset({
    657145859439329280,
    677183404743327764,
    735954079355895889,
    755763454266179595,
    777323857018617877,
    793570278084968488,
    925379778251485206,
    941041008169336913,
    1109212629882392586,
    1121773567785308181,
    1156980445058170991,
    1163945469567832215,
    1265742860783845558,
})


class RoleSelectionError(ValueError):
    """A role was selected that isn't offered by the menu."""


class RoleAction(enum.Enum):
    DENIED = "denied"
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class RoleToggle:
    """What to do with a toggled role, and the reply to send."""

    action: RoleAction
    message: str


def toggle_role(selected_role_id: int, member_role_ids: Iterable[int]) -> RoleToggle:
    """Decide whether a self-assignable role button adds or removes the role."""
    roles = {int(role_id) for role_id in member_role_ids}
    selected = int(selected_role_id)
    if selected == ROLE_ID_POLL:
        if ROLE_ID_NATIVE not in roles:
            return RoleToggle(
                RoleAction.DENIED,
                f"Sorry, <@&{selected}> is only available for <@{ROLE_ID_NATIVE}>s!",
            )
    elif selected not in VALID_TOGGLE_ROLES:
        raise RoleSelectionError(f"Role id {selected} was unexpected")
    if selected in roles:
        return RoleToggle(RoleAction.REMOVED, f"I took away your <@&{selected}> role!")
    return RoleToggle(RoleAction.ADDED, f"I gave you the <@&{selected}> role!")


def proficiency_roles(member_role_ids: Iterable[int], selected_role_id: int) -> list[int]:
    """The member's roles with the proficiency rank replaced by the selected one.

    Picking Cyprus also grants Native.
    """
    selected = int(selected_role_id)
    roles = [int(r) for r in member_role_ids if int(r) not in PROFICIENCY_ROLES]
    roles.append(selected)
    if selected == ROLE_ID_CYPRUS:
        roles.append(ROLE_ID_NATIVE)
    return roles


def booster_roles(
    member_role_ids: Iterable[int], selected_role_id: int, is_boosting: bool
) -> tuple[list[int] | None, str | None]:
    """Resolve a colour menu choice; a selected id of 0 means no colour.

    Returns the member's new role list (None when the member is not to be
    modified) and the reply to send (None when there is none).
    """
    current = [int(r) for r in member_role_ids]
    selected = int(selected_role_id)
    roles = [r for r in current if r not in COLOR_ROLES]
    if is_boosting:
        if selected != 0:
            roles.append(selected)
            return roles, f"I gave you the <@&{selected}> role!"
        if len(roles) < len(current):
            return roles, "I took away your color role!"
        return roles, None
    if selected != 0:
        return None, f"Sorry, custom colors are only available for <@&{ROLE_ID_BOOSTER}>s!"
    return None, None