"""Recording and replaying a controller's input frame by frame."""

from __future__ import annotations


class ControllerRecord:
    """One input held for a run of consecutive frames."""

    def __init__(self, start_time: int, input: int) -> None:
        self.input = input
        self.start_time = start_time
        self.time_length = 1
        self.gx = 0
        self.gy = 0

    @property
    def end_time(self) -> int:
        """First frame after the record; the input is not held on it."""
        return self.start_time + self.time_length

    def check_input(self, time: int) -> int:
        """Return the recorded input if ``time`` lies inside the record, else 0."""
        if self.start_time <= time < self.end_time:
            return self.input
        return 0

    def add_time(self) -> None:
        """Extend the record by one frame."""
        self.time_length += 1

    def set_end_time(self, time: int) -> None:
        """Cut the record so that it ends at ``time``."""
        if time > self.start_time:
            self.time_length = time - self.start_time
        else:
            self.start_time = time
            self.time_length = 0

    def __repr__(self) -> str:
        return (
            f"ControllerRecord(input={self.input}, start_time={self.start_time}, "
            f"time_length={self.time_length})"
        )


class ControllerRecorder:
    """Keeps the inputs a controller produced so past movement can be replayed."""

    def __init__(self, start_time: int) -> None:
        self.time = start_time
        self.index = 0
        self.records: list[ControllerRecord] = []
        if self.time > 0:
            blank = ControllerRecord(0, 0)
            blank.set_end_time(start_time)
            self.records.append(blank)
            self.index += 1

    def _current(self) -> ControllerRecord | None:
        if 0 <= self.index < len(self.records):
            return self.records[self.index]
        return None

    def init(self) -> None:
        """Rewind to the first frame."""
        self.time = 0
        self.index = 0

    def add_time(self) -> None:
        """Advance one frame, moving on to the next record when the current one ends."""
        self.time += 1
        current = self._current()
        if current is not None and current.end_time <= self.time:
            self.index = min(len(self.records) + 1, self.index + 1)

    def exist_record(self) -> bool:
        """True while the recording still covers the current frame."""
        if not self.records:
            return False
        return self.records[-1].end_time > self.time

    def check_input(self) -> int:
        """Input recorded for the current frame, or 0 if there is none."""
        if not self.exist_record():
            return 0
        current = self._current()
        if current is None:
            return 0
        return current.check_input(self.time)

    def write_record(self, input: int) -> None:
        """Record one frame of input, extending the last record when it matches."""
        if self.records and self.records[-1].input == input:
            self.records[-1].add_time()
        else:
            self.records.append(ControllerRecord(self.time, input))
            self.index += 1

    def discard_record(self) -> None:
        """Drop everything recorded after the current frame."""
        while self.records and self.records[-1].start_time > self.time:
            self.records.pop()
        if self.records:
            self.records[-1].set_end_time(self.time)

    def set_goal(self, gx: int, gy: int) -> None:
        """Attach an attack target to the latest record."""
        if not self.exist_record():
            return
        self.records[-1].gx = gx
        self.records[-1].gy = gy

    def get_goal(self) -> tuple[int, int] | None:
        """Attack target stored with the current record, or None if there is none."""
        if not self.exist_record():
            return None
        current = self._current()
        if current is None:
            return None
        return current.gx, current.gy