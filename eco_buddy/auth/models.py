"""登录身份数据模型。"""
from typing import Optional

from pydantic import BaseModel, Field


class Identity(BaseModel):
    """外部身份提供方返回的用户信息；昵称与邮箱只在首次授权时提供。"""
    user_id: str = Field(..., min_length=1, description="提供方给出的用户唯一 ID")
    display_name: Optional[str] = Field(None, description="显示名")
    email: Optional[str] = Field(None, description="邮箱")
    signed_in_at: Optional[str] = Field(None, description="登录时间 ISO")
