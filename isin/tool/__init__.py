"""isin.tool — bulk screening and the isin-tool command line."""

from isin.tool.screening import ScreeningReport as ScreeningReport
from isin.tool.screening import ScreenOutcome as ScreenOutcome
from isin.tool.screening import screen_line as screen_line
from isin.tool.screening import screen_lines as screen_lines
