"""휴게 기록 점검 서비스 — 근태 기록의 실제 휴게 목록 검사.

Break Record Service — Checks over the recorded breaks of one attendance day:
timeline ordering, sequential numbering, overlap between completed breaks,
and the per-day break limit from BreakConfig.max_breaks_per_day.
"""

from itertools import combinations
from typing import Sequence

from hr_rules.schemas.break_period import BreakRecord
from hr_rules.utils.time_utils import parse_clock_to_minutes, ranges_overlap


class BreakRecordService:

    def is_break_timeline_ordered(self, records: Sequence[BreakRecord]) -> bool:
        """break_number가 감소하지 않으면 True (중복 번호는 허용)."""
        return all(
            later.break_number >= earlier.break_number
            for earlier, later in zip(records, records[1:])
        )

    def is_break_number_sequential(self, records: Sequence[BreakRecord]) -> bool:
        """정렬된 break_number가 정확히 1..N 이면 True."""
        numbers: list[int] = sorted(record.break_number for record in records)
        return numbers == list(range(1, len(numbers) + 1))

    def sort_breaks_by_number(self, records: Sequence[BreakRecord]) -> list[BreakRecord]:
        return sorted(records, key=lambda record: record.break_number)

    @staticmethod
    def _completed_ranges(
        records: Sequence[BreakRecord],
    ) -> list[tuple[BreakRecord, tuple[int, int]]]:
        """시작/종료가 모두 기록되고 파싱 가능한 휴게만 추립니다.

        Keep only completed breaks whose start and end both parse.
        """
        ranges: list[tuple[BreakRecord, tuple[int, int]]] = []
        for record in records:
            start: int | None = parse_clock_to_minutes(record.break_start)
            end: int | None = parse_clock_to_minutes(record.break_end)
            if start is not None and end is not None:
                ranges.append((record, (start, end)))
        return ranges

    def find_overlapping_breaks(
        self, records: Sequence[BreakRecord]
    ) -> list[tuple[BreakRecord, BreakRecord]]:
        """겹치는 완료 휴게 쌍을 모두 찾습니다 (Every overlapping pair of completed breaks)."""
        return [
            (first, second)
            for (first, first_range), (second, second_range) in combinations(
                self._completed_ranges(records), 2
            )
            if ranges_overlap(first_range, second_range)
        ]

    def has_break_overlap(self, records: Sequence[BreakRecord]) -> bool:
        return len(self.find_overlapping_breaks(records)) > 0

    def is_within_max_breaks(self, records: Sequence[BreakRecord], max_breaks_per_day: int) -> bool:
        return len(records) <= max_breaks_per_day

    def can_add_new_break(self, current_break_count: int, max_breaks_per_day: int) -> bool:
        return current_break_count < max_breaks_per_day


break_record_service: BreakRecordService = BreakRecordService()
