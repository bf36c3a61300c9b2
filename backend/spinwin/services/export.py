import csv
import io
from collections.abc import Iterable

from ..models.spin import Spin

HEADER = 'Name,Contact,Prize,Timestamp\n'


def spins_to_csv(spins: Iterable[Spin]) -> str:
    """Render spins as CSV, every field quoted with inner quotes doubled.

    Values are not otherwise sanitized: a comma or newline stays inside
    its quoted field, so tools that split lines on bare commas will see
    shifted columns.
    """
    output = io.StringIO()
    output.write(HEADER)
    writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator='\n')
    for spin in spins:
        writer.writerow([
            spin.name or '',
            spin.contact or '',
            spin.prize or '',
            spin.timestamp.isoformat() if spin.timestamp else '',
        ])
    return output.getvalue()
