"""状态刷新计时器：在 Qt 事件循环里周期性推进伙伴的时间。"""
import sys
from typing import Optional

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from eco_buddy.app.state import AppState, BuddySnapshot
from eco_buddy.config import STATS_UPDATE_INTERVAL_MS


class StatsTicker(QObject):
    """每个间隔执行一次：属性衰减 → 跨日长大 → 发出最新快照。"""
    statsUpdated = pyqtSignal(object)  # BuddySnapshot
    evolved = pyqtSignal(str)          # 新阶段
    leveledUp = pyqtSignal(int)        # 新等级（任何来源）

    def __init__(
        self,
        state: AppState,
        interval_ms: int = STATS_UPDATE_INTERVAL_MS,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self._state = state
        self._last_level = state.buddy.level
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self.tick)

    def start(self) -> None:
        print(f"[伙伴-计时] 开始，每 {self._timer.interval()} ms 刷新一次", file=sys.stderr, flush=True)
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()
        print("[伙伴-计时] 已停止", file=sys.stderr, flush=True)

    def is_active(self) -> bool:
        return self._timer.isActive()

    def tick(self) -> BuddySnapshot:
        """执行一次刷新；也可以在测试里直接调用。

        升级不论来自照顾动作还是长大，都在下一次刷新时按等级变化发出。
        """
        self._state.update_stats()
        for report in self._state.advance_calendar():
            if report.evolved:
                self.evolved.emit(report.evolved_to.value)
        level = self._state.buddy.level
        if level > self._last_level:
            self.leveledUp.emit(level)
        self._last_level = level
        snapshot = self._state.snapshot()
        self.statsUpdated.emit(snapshot)
        return snapshot
