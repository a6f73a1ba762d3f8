from dataclasses import dataclass


# fmt: off
@dataclass(frozen=True)
class UrlMapping:
    short_id: str   # Unique short identifier (table partition key)
    long_url: str   # Original long URL, stored verbatim
# fmt: on
