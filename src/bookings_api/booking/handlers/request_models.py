from pydantic import BaseModel, ConfigDict, Field


class UpsertBookingRequest(BaseModel):
    """予約作成・更新リクエストスキーマ"""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "resourceID": "room-101",
                    "starttimeepochtime": 1735689600,
                }
            ]
        },
    )

    resource_id: str = Field(
        ...,
        alias="resourceID",
        min_length=1,
        description="予約対象リソースID",
        examples=["room-101"],
    )

    start_time_epoch: int = Field(
        ...,
        alias="starttimeepochtime",
        strict=True,
        ge=0,
        description="開始時刻（エポック秒）",
        examples=[1735689600],
    )
