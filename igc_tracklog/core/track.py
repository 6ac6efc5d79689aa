"""
Track assembly for IGC Tracklog.
Walks the lines of an IGC file once and builds the ordered fix sequence.
"""

import dataclasses
import datetime
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

from ..data.models import Fix, FlightMetadata, RecordType
from ..data.parser import IGCParser
from ..exceptions import StructuralParseError, InvalidPolicyError
from ..config.constants import (
    ACTIVITY_MARKER,
    PHASE_MARKER,
    ON_FIX_ERROR_ABORT,
    ON_FIX_ERROR_SKIP,
)

# Configure logger
logger = logging.getLogger("igc_tracklog.core.track")


class FixErrorPolicy(Enum):
    """What to do with a B record that does not match the fix layout"""
    ABORT = ON_FIX_ERROR_ABORT
    SKIP = ON_FIX_ERROR_SKIP


@dataclass
class ScanState:
    """Running state threaded through a single pass over the lines"""
    activity: Optional[str] = None
    phase: Optional[str] = None
    security: Optional[str] = None
    track_points: List[Fix] = field(default_factory=list)
    skipped_lines: List[int] = field(default_factory=list)
    done: bool = False

    @property
    def last_timestamp(self) -> Optional[datetime.datetime]:
        return self.track_points[-1].timestamp if self.track_points else None


class TrackAssembler:
    """
    Builds the fix sequence of an IGC file.

    Header records are skipped (the header decoder has already read them),
    L records update the running activity/phase markers, B records are
    decoded with those markers, and the first G record ends the scan.
    """

    def __init__(self, on_fix_error: Union[FixErrorPolicy, str] = FixErrorPolicy.ABORT):
        """
        Initialize the assembler.

        Args:
            on_fix_error: Policy for malformed B records, ABORT (raise) or SKIP (log and continue)
        """
        try:
            self.on_fix_error = FixErrorPolicy(on_fix_error)
        except ValueError as e:
            raise InvalidPolicyError(f"Unknown fix error policy: {on_fix_error!r}") from e

    def assemble(self,
                 lines: Iterable[str],
                 metadata: FlightMetadata) -> Tuple[List[Fix], FlightMetadata]:
        """
        Scan all lines of a file and collect its valid fixes.

        Args:
            lines: All lines of the IGC file
            metadata: Metadata from the header decoder

        Returns:
            Tuple[List[Fix], FlightMetadata]: The fixes in file order, and the
            metadata with the security record attached (if any)

        Raises:
            StructuralParseError: On a malformed B record when the policy is ABORT
        """
        reference_date = metadata.date or datetime.datetime.now(datetime.timezone.utc).date()
        state = ScanState()

        for line_number, line in enumerate(lines, 1):
            self._consume(line, line_number, reference_date, state)
            if state.done:
                break

        if state.skipped_lines:
            logger.warning(f"Skipped {len(state.skipped_lines)} malformed B records")
        logger.debug(f"Assembled {len(state.track_points)} fixes")

        if state.security is not None:
            metadata = dataclasses.replace(metadata, security=state.security)
        return state.track_points, metadata

    def _consume(self,
                 line: str,
                 line_number: int,
                 reference_date: datetime.date,
                 state: ScanState) -> None:
        record_type = RecordType.from_line(line)

        if record_type is RecordType.HEADER:
            return

        if record_type is RecordType.SECURITY:
            state.security = line
            state.done = True
            return

        if record_type is RecordType.LOGBOOK:
            if ACTIVITY_MARKER in line:
                state.activity = line
            elif PHASE_MARKER in line:
                state.phase = line
            return

        if record_type is RecordType.FIX:
            try:
                fix = IGCParser.parse_fix(
                    line,
                    reference_date,
                    activity=state.activity,
                    phase=state.phase,
                    prev_timestamp=state.last_timestamp,
                )
            except StructuralParseError as e:
                error = StructuralParseError(str(e), line=line, line_number=line_number)
                if self.on_fix_error is FixErrorPolicy.ABORT:
                    raise error from e
                logger.warning(f"Skipping malformed fix: {error}")
                state.skipped_lines.append(line_number)
                return

            if fix is not None:
                state.track_points.append(fix)
