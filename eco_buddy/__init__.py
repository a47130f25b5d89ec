"""生态伙伴：虚拟宠物模拟核心。"""
__version__ = "0.1.0"
