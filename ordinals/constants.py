from typing import Final

ST: Final = 'st'
ND: Final = 'nd'
RD: Final = 'rd'
TH: Final = 'th'

SUFFIX_PERIOD = 100                         # the 11-13 band only repeats every hundred (111th, but 31st)
TEEN_LOW, TEEN_HIGH = 11, 13                # the band that always takes 'th' (11th, 112th, 1013th...)

CONFIG_FILE = 'ordinals.toml'               # settings file looked up in the working directory
DEFAULT_TZ_NAME = 'UTC'
DEFAULT_DATE_FORMAT = '%A, %B {day}, %Y'    # strftime format, `{day}` becomes the ordinal day of month
DAY_PLACEHOLDER = '{day}'
