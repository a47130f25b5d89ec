"""生态伙伴入口：登录 → 创建伙伴 → 周期刷新并输出状态与到期提醒。"""
import getpass
import os
import signal
import sys
from typing import Optional

from PyQt6.QtCore import QCoreApplication

from eco_buddy import __version__
from eco_buddy.app.state import AppState, BuddySnapshot
from eco_buddy.app.ticker import StatsTicker
from eco_buddy.auth.manager import AuthManager
from eco_buddy.config import STATS_UPDATE_INTERVAL_MS, ensure_dirs
from eco_buddy.reminders.planner import CareReminderPlanner, due_between
from eco_buddy.reminders.store import ReminderSettingsStore


def _local_provider() -> Optional[dict]:
    """本机身份：没有接入第三方登录时用系统用户名。"""
    user = os.environ.get("ECO_BUDDY_USER", "").strip() or getpass.getuser()
    return {"id": user, "name": user, "email": None}


def main() -> None:
    ensure_dirs()
    app = QCoreApplication(sys.argv)
    app.setApplicationName("生态伙伴")
    app.setApplicationVersion(__version__)
    signal.signal(signal.SIGINT, signal.SIG_DFL)

    # 1. 恢复会话，失败则重新登录
    auth = AuthManager(provider=_local_provider)
    identity = auth.restore_session() or auth.sign_in()
    if identity is None:
        sys.exit(1)

    # 2. 伙伴与照顾者档案
    state = AppState()
    auth.seed_display_name(state.profile)
    planner = CareReminderPlanner(ReminderSettingsStore().load(identity.user_id))

    # 3. 每次刷新输出快照，并列出这个间隔里到期的提醒
    last = {"at": state.clock()}

    def on_update(snapshot: BuddySnapshot) -> None:
        print(
            f"[伙伴-状态] {snapshot.appearance} {snapshot.name} {snapshot.mood.value} "
            f"饱腹{snapshot.hunger} 快乐{snapshot.happiness} 健康{snapshot.health} "
            f"精力{snapshot.energy} 清洁{snapshot.cleanliness} Lv{snapshot.level} "
            f"{'睡觉中' if snapshot.is_asleep else '醒着'}",
            file=sys.stderr,
            flush=True,
        )
        reminders = planner.plan_all(state.buddy, last["at"])
        for r in due_between(reminders, last["at"], snapshot.taken_at):
            print(f"[伙伴-提醒] {r.title} {r.body}", file=sys.stderr, flush=True)
        last["at"] = snapshot.taken_at

    ticker = StatsTicker(state, interval_ms=STATS_UPDATE_INTERVAL_MS)
    ticker.statsUpdated.connect(on_update)
    ticker.evolved.connect(lambda stage: print(f"[伙伴-成长] 进化为 {stage}", file=sys.stderr, flush=True))
    ticker.leveledUp.connect(lambda level: print(f"[伙伴-成长] 升到 {level} 级", file=sys.stderr, flush=True))
    app.aboutToQuit.connect(ticker.stop)
    ticker.tick()
    ticker.start()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
