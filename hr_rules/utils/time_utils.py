"""시각 문자열 연산 유틸리티 모듈.

Time-of-day arithmetic utility module.
Parses "HH:MM" strings into minute-of-day integers and projects
overnight (cross-midnight) ranges onto a single 48-hour timeline.

Timeline model:
    하루는 0..1439분. 야간 근무는 종료 시각이 다음 날이므로
    다음 날에 속하는 시각에 1440분을 더해 하나의 직선 위에 놓는다.
    A day is minutes 0..1439. For overnight intervals every point that
    belongs to the following day is shifted by +1440 so that ordinary
    comparisons (start < end, containment, overlap) keep working.
"""

import re

MINUTES_PER_DAY: int = 1440

# 엄격한 HH:MM 형식: 00:00 ~ 23:59 only, two digits each
_TIME_PATTERN = re.compile(r"([01][0-9]|2[0-3]):([0-5][0-9])")

# 기록된 시각용 느슨한 형식: HH:MM, HH:MM:SS or the time part of an ISO datetime
_CLOCK_PATTERN = re.compile(r"([0-9]{2}):([0-9]{2})(?::[0-9]{2}(?:\.[0-9]+)?)?")


def parse_time_to_minutes(value: str | None) -> int | None:
    """"HH:MM" 문자열을 자정 기준 분 단위 정수로 변환합니다.

    Parse a strict "HH:MM" string into minutes since midnight.

    Args:
        value: 시각 문자열 (Time string, e.g. "09:30")

    Returns:
        int | None: 0..1439 분, 형식이 잘못되면 None (None on any format violation)
    """
    if not isinstance(value, str):
        return None
    match = _TIME_PATTERN.fullmatch(value)
    if match is None:
        return None
    return int(match.group(1)) * 60 + int(match.group(2))


def is_valid_time_string(value: str | None) -> bool:
    return parse_time_to_minutes(value) is not None


def parse_clock_to_minutes(value: str | None) -> int | None:
    """기록된 시각(HH:MM, HH:MM:SS, ISO datetime)을 분 단위로 변환합니다.

    Lenient parser for recorded break times. ISO datetimes such as
    "2025-01-01T09:30:00" contribute their time part only.
    """
    if not value or not isinstance(value, str):
        return None
    time_part: str = value.split("T", 1)[1] if "T" in value else value
    # 타임존 접미사 제거 (Drop "Z", "+09:00" or "-05:00" suffixes)
    time_part = re.split(r"[Z+-]", time_part, maxsplit=1)[0]
    match = _CLOCK_PATTERN.fullmatch(time_part)
    if match is None:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return hours * 60 + minutes


def normalize_work_interval(start: int, end: int, overnight: bool) -> tuple[int, int]:
    """근무 구간을 48시간 타임라인에 펼칩니다.

    Unroll a work interval onto the 48-hour timeline.
    An overnight interval whose end is not after its start ends the next day.
    """
    if overnight and end <= start:
        end += MINUTES_PER_DAY
    return start, end


def project_onto_timeline(minutes: int, anchor: int, overnight: bool) -> int:
    """시각 하나를 기준 시각(근무 시작)의 타임라인으로 투영합니다.

    Project a single time-of-day onto the timeline that starts at `anchor`.
    For overnight schedules, a point earlier than the anchor belongs
    to the following day.
    """
    if overnight and minutes < anchor:
        return minutes + MINUTES_PER_DAY
    return minutes


def normalize_range(
    start: int,
    end: int,
    overnight: bool,
    anchor: int | None = None,
) -> tuple[int, int]:
    """휴게 구간을 타임라인에 투영합니다.

    Normalize a break range for comparison.
    With an anchor, the start decides the day: when it falls before the
    anchor both points move to the following day together. A range that
    starts on the first day and ends past midnight (23:30-00:30) has its
    end unrolled; a range that starts on the following day never wraps
    again, so a reversed next-day range stays reversed.

    Args:
        start: 시작 분 (Start minute of day)
        end: 종료 분 (End minute of day)
        overnight: 야간 근무 여부 (Whether the schedule crosses midnight)
        anchor: 근무 시작 분, 있으면 시작 시각 기준으로 두 점을 함께 이동
                (Work start; when given, both points shift by the same amount)

    Returns:
        tuple[int, int]: 정규화된 (start, end)
    """
    if not overnight:
        return start, end
    if anchor is not None:
        shift = project_onto_timeline(start, anchor, overnight) - start
        start, end = start + shift, end + shift
        # 첫날 시작 구간만 자정을 넘어 종료 가능 (Only a first-day start may end past midnight)
        if end < start and start < MINUTES_PER_DAY:
            end += MINUTES_PER_DAY
        return start, end
    # 기준이 없으면 자정을 넘는 구간만 펼침 (No anchor: only unroll a wrapped range)
    if end < start:
        end += MINUTES_PER_DAY
    return start, end


def ranges_overlap(range1: tuple[int, int], range2: tuple[int, int]) -> bool:
    """두 반열린 구간 [start, end)의 겹침 여부 — 끝점이 맞닿는 경우는 겹치지 않음.

    Half-open overlap test: touching endpoints do not overlap.
    """
    return max(range1[0], range2[0]) < min(range1[1], range2[1])
