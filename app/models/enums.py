from enum import Enum

class YesNo(str, Enum):
    YES = "yes"
    NO = "no"

class OutcomeKind(str, Enum):
    PURCHASED = "PURCHASED"
    INVALID_REQUEST = "INVALID_REQUEST"
    ESTIMATE_FAILED = "ESTIMATE_FAILED"
    THRESHOLD_REJECTED = "THRESHOLD_REJECTED"
    PURCHASE_FAILED = "PURCHASE_FAILED"

class NotificationStatus(str, Enum):
    SKIPPED = "SKIPPED"
    SENT = "SENT"
    FAILED = "FAILED"

class ActionType(str, Enum):
    CELL = "cell"
