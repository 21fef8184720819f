"""
Fixed geometry of the reference edition (Madinah Mushaf, Hafs).

These values form a stable contract with the printed edition and are not
configurable.
"""

TOTAL_PAGES = 604
LINES_PER_PAGE = 15
TOTAL_SURAHS = 114
TOTAL_JUZ = 30
TOTAL_HIZB = 60

# Surah introduced by a banner only, without a basmala line
SURAH_WITHOUT_BASMALA = 9
