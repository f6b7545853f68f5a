from datetime import datetime

from eduscan.attendance.factory import AttendanceStrategyFactory
from eduscan.attendance.strategies.late_strategy import LateStrategy
from eduscan.attendance.strategies.present_strategy import PresentStrategy
from eduscan.core.enums import AttendanceStatus


def test_factory_before_cutoff_is_present():
    now = datetime(2025, 1, 1, 8, 59, 59)

    strategy = AttendanceStrategyFactory().for_scan(now=now)

    assert isinstance(strategy, PresentStrategy)
    assert strategy.decide(now=now) == AttendanceStatus.PRESENT


def test_factory_at_cutoff_is_late():
    now = datetime(2025, 1, 1, 9, 0, 0)

    strategy = AttendanceStrategyFactory().for_scan(now=now)

    assert isinstance(strategy, LateStrategy)
    assert strategy.decide(now=now) == AttendanceStatus.LATE


def test_factory_custom_cutoff():
    factory = AttendanceStrategyFactory(late_cutoff_hour=8)
    assert isinstance(factory.for_scan(now=datetime(2025, 1, 1, 8, 0)), LateStrategy)
    assert isinstance(factory.for_scan(now=datetime(2025, 1, 1, 7, 59)), PresentStrategy)
