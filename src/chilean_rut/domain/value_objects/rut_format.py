from enum import Enum


class RutFormat(Enum):
    FULL = "full"  # 12.345.678-9
    ONLY_DASH = "only_dash"  # 12345678-9
    ESCAPED = "escaped"  # 123456789
