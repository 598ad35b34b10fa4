from .report import ChainSummary, format_report, save_report, summarize
from .tables import format_tables
