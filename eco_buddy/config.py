"""生态伙伴全局配置与路径。"""
import os
from pathlib import Path

# 项目根目录（eco_buddy 包所在目录的上一级）
ROOT_DIR = Path(__file__).resolve().parent.parent
# 数据目录：登录偏好、提醒设置等（模拟状态本身不落盘）
DATA_DIR = Path(os.environ.get("ECO_BUDDY_DATA_DIR", "").strip() or ROOT_DIR / "data")
AUTH_DATA_DIR = DATA_DIR / "auth"  # 已登录用户标识
REMINDERS_DATA_DIR = DATA_DIR / "reminders"  # 提醒开关

# 状态刷新计时器（毫秒）
STATS_UPDATE_INTERVAL_MS = 60_000

# 生态币初始余额
STARTING_ECO_CREDITS = 100

# 新伙伴的默认属性（0~100）
DEFAULT_HAPPINESS = 80
DEFAULT_HEALTH = 85
DEFAULT_HUNGER = 70  # 越低越饿
DEFAULT_ENERGY = 90  # 越低越累
DEFAULT_CLEANLINESS = 85  # 越低越脏
DEFAULT_HOURS_SINCE_SLEEP = 8

VITAL_MIN = 0
VITAL_MAX = 100

# 衰减速率（每小时）
HUNGER_DECAY_PER_HOUR = 2.0
CLEANLINESS_DECAY_PER_HOUR = 1.0
ENERGY_DRAIN_PER_HOUR = 1.5
ENERGY_RECOVERY_PER_HOUR = 0.5

# 作息：22:00 ~ 06:00 为夜间
NIGHT_START_HOUR = 22
NIGHT_END_HOUR = 6

# 成长
EXPERIENCE_PER_LEVEL = 100
LEVEL_UP_HAPPINESS_BONUS = 5
LEVEL_UP_HEALTH_BONUS = 5

# 照顾动作：花费（生态币）与经验
PLAY_COST = 15
CLEAN_COST = 20
REST_COST = 5
MEDICAL_COST = 25
PLAY_EXPERIENCE = 10
CLEAN_EXPERIENCE = 8
MEDICAL_EXPERIENCE = 12
REST_NIGHT_EXPERIENCE = 5
REST_DAY_EXPERIENCE = 3
PET_INTERACTION_EXPERIENCE = 1

# 提醒阈值
CRITICAL_HUNGER = 20
CRITICAL_ENERGY = 15
CRITICAL_HEALTH = 25
CRITICAL_CLEANLINESS = 20
EVOLUTION_IMMINENT_PROGRESS = 0.8
LEVEL_UP_IMMINENT_XP = 20


def ensure_dirs() -> None:
    """确保数据目录存在。"""
    for d in (DATA_DIR, AUTH_DATA_DIR, REMINDERS_DATA_DIR):
        d.mkdir(parents=True, exist_ok=True)
