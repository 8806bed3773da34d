from enum import Enum

class ComponentCategory(str, Enum):
    CUSTOM = "custom"
    OOTB = "ootb"

class LoadStatus(str, Enum):
    NOT_LOADED = "not_loaded"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"
