"""Display models derived from a ListSession."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from demonlist.core.levels import Editor, Failed, Loaded, Record, Role
from demonlist.core.rules import ScoreFunction, points_for, qualification_text, rank_label
from demonlist.core.score import score as default_score
from demonlist.core.session import ListSession

NO_MATCHES_TEXT = "No levels match your search."
FREE_TO_COPY = "Free to Copy"

ROLE_ICONS: Dict[Role, str] = {
    Role.OWNER: "crown",
    Role.ADMIN: "user-gear",
    Role.HELPER: "user-shield",
    Role.DEV: "code",
    Role.TRIAL: "user-lock",
}

LIST_REQUIREMENTS = [
    "Achieved the record without using hacks (however, FPS bypass is allowed, up to 360fps).",
    "Achieved the record on the level that is listed on the site - please check the level ID before you submit a record!",
    "Have either source audio or clicks/taps in the video. Edited audio only does not count.",
    "If possible, have cheat indicator, CPS and Clock.",
    'If possible use the "Toggle Percentage" Geode mod. It makes it easier for us to accept your records.',
    "The recording must also show the player hit the endwall and show the end screen, or the completion will be invalidated.",
    "Do not use secret routes or bug routes.",
    "Please play on the original copy of the level.",
    "Your record must be accepted in the Global Demonlist.",
]


@dataclass
class LevelRow:
    """One row of the list column."""

    index: int
    rank_label: str
    title: str
    active: bool
    error: bool


@dataclass
class LevelDetails:
    name: str
    author: str
    creators: List[str]
    verifier: str
    video: Optional[str]
    points: float
    level_id: str
    password: str
    qualification: str
    records: List[Record]


@dataclass
class EditorRow:
    name: str
    role: Role
    icon: str
    link: Optional[str]


def build_rows(session: ListSession) -> List[LevelRow]:
    rows: List[LevelRow] = []
    for i, slot in enumerate(session.filtered_view()):
        if isinstance(slot, Loaded):
            title = slot.level.name
        else:
            title = f"Error ({slot.token}.json)"
        rows.append(
            LevelRow(
                index=i,
                rank_label=rank_label(session.rank_of_slot(slot)),
                title=title,
                active=i == session.selected_index,
                error=isinstance(slot, Failed),
            )
        )
    return rows


def build_details(session: ListSession, score: ScoreFunction = default_score) -> Optional[LevelDetails]:
    """Details panel for the current selection, or None when nothing is selected."""
    level = session.selected_level()
    if level is None:
        return None
    rank = session.original_rank_of(level)
    return LevelDetails(
        name=level.name,
        author=level.author,
        creators=list(level.creators),
        verifier=level.verifier,
        video=level.showcase or level.verification,
        points=points_for(rank, level, score=score),
        level_id=str(level.id),
        password=level.password or FREE_TO_COPY,
        qualification=qualification_text(rank, level.percent_to_qualify),
        records=list(level.records),
    )


def build_editor_rows(editors: Optional[List[Editor]]) -> Optional[List[EditorRow]]:
    """Editor panel rows; None means the panel is omitted."""
    if editors is None:
        return None
    return [
        EditorRow(name=e.name, role=e.role, icon=ROLE_ICONS[e.role], link=e.link)
        for e in editors
    ]
