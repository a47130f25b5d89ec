"""应用层：状态持有与周期刷新。"""
from eco_buddy.app.state import AppState, BuddySnapshot

__all__ = ["AppState", "BuddySnapshot"]
