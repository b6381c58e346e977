from typing import List

from tabulate import tabulate

from kn_common.constants import ELLIPSIS_PREFIX, PATH_SEPARATOR
from kn_core.ranking import Finding

MAX_LOCATION_COMPONENTS = 2


def format_congruence(finding: Finding) -> str:
    if not finding.congruence:
        return "literal"
    return ", ".join(str(c) for c in finding.congruence)


def format_findings_table(findings: List[Finding]) -> str:
    """Ranked candidates as a table, best first."""
    table_data = [
        {"Path": str(finding.path), "Congruence": format_congruence(finding)}
        for finding in findings
    ]
    return tabulate(table_data, headers="keys", tablefmt="simple", showindex=range(1, len(findings) + 1))


def compose_location(components: List[str]) -> str:
    """Short breadcrumb of the confirmed components, e.g. `.../src/kn/`."""
    if not components:
        return ""
    shown = components[-MAX_LOCATION_COMPONENTS:]
    prefix = ELLIPSIS_PREFIX if len(components) > MAX_LOCATION_COMPONENTS else ""
    return prefix + PATH_SEPARATOR.join(shown) + PATH_SEPARATOR
