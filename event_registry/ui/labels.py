"""Display labels for the closed participant categories."""
from event_registry.models.participant import (
    DietaryRestriction,
    ParticipationType,
    Skillset,
)

SKILLSET_LABELS = {
    Skillset.DEVELOPER: "開發者",
    Skillset.DESIGNER: "設計師",
    Skillset.WRITER: "寫手",
    Skillset.PRESENTER: "講者",
}

PARTICIPATION_LABELS = {
    ParticipationType.IN_PERSON: "現場參加",
    ParticipationType.ONLINE: "線上參加",
}

DIETARY_LABELS = {
    DietaryRestriction.NONE: "無",
    DietaryRestriction.VEGETARIAN: "蛋奶素",
    DietaryRestriction.VEGAN: "全素",
    DietaryRestriction.GLUTEN_FREE: "無麩質",
    DietaryRestriction.NUT_FREE: "無堅果",
    DietaryRestriction.DAIRY_FREE: "無乳製品",
    DietaryRestriction.OTHER: "其他",
}

PARTICIPATION_COLORS = {
    ParticipationType.IN_PERSON: "#22d3ee",
    ParticipationType.ONLINE: "#a855f7",
}
