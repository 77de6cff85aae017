import os

import boto3
from boto3.dynamodb.conditions import Key
from boto3.dynamodb.types import TypeSerializer
from botocore.exceptions import ClientError

from bookings_api.booking.domain.entity import Booking
from bookings_api.booking.domain.repository import BookingRepository
from bookings_api.booking.domain.value_object import (
    BookingId,
    ResourceId,
    Slot,
    StartTimeEpoch,
    UserId,
)
from bookings_api.shared.domain.exception import (
    ConflictException,
    DomainException,
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
    StoreException,
)

_serializer = TypeSerializer()


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    1予約につき2アイテムを書き込む。
    - 予約本体: PK=BOOKING#{id}, SK=BOOKING（GSI1 でユーザー別に検索）
    - 枠アイテム: PK=RESOURCE#{resource}, SK=SLOT#{start}（枠の一意性を保証）
    両者は常に TransactWriteItems で同時に更新する。
    """

    def __init__(
        self,
        table_name: str | None = None,
        table=None,
        client=None,
    ) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.table = table or boto3.resource("dynamodb").Table(self.table_name)
        self.client = client or boto3.client("dynamodb")

    def save(self, booking: Booking) -> None:
        """予約をDBに保存する"""
        transact_items = [
            self._put(self._to_item(booking), "attribute_not_exists(PK)"),
            self._put(self._to_slot_item(booking), "attribute_not_exists(PK)"),
        ]
        try:
            self.client.transact_write_items(TransactItems=transact_items)
        except ClientError as e:
            reasons = self._cancellation_reasons(e)
            if self._condition_failed(reasons, 0):
                raise DuplicateResourceException(
                    f"Booking already exists: {booking.id}"
                ) from e
            if self._condition_failed(reasons, 1):
                raise ConflictException(
                    f"Resource already booked: slot={booking.slot}"
                ) from e
            raise self._to_domain_error(e, reasons, booking) from e

    def update(
        self, booking: Booking, expected_version: int, previous_slot: Slot
    ) -> None:
        """予約を置き換える"""
        booking_id_values = {":booking_id": str(booking.id)}
        transact_items = [
            self._put(
                self._to_item(booking),
                "version = :expected",
                {":expected": expected_version},
            )
        ]

        # 同一アイテムへの複数操作はトランザクション内で許可されない
        if booking.slot == previous_slot:
            transact_items.append(
                self._put(
                    self._to_slot_item(booking),
                    "booking_id = :booking_id",
                    booking_id_values,
                )
            )
        else:
            transact_items.append(
                self._delete(
                    self._slot_key(previous_slot),
                    "booking_id = :booking_id",
                    booking_id_values,
                )
            )
            transact_items.append(
                self._put(self._to_slot_item(booking), "attribute_not_exists(PK)")
            )

        try:
            self.client.transact_write_items(TransactItems=transact_items)
        except ClientError as e:
            reasons = self._cancellation_reasons(e)
            if self._condition_failed(reasons, 0):
                raise self._version_error(reasons[0], booking, expected_version) from e
            if any(
                self._condition_failed(reasons, i)
                for i in range(1, len(transact_items))
            ):
                raise ConflictException(
                    f"Resource already booked: slot={booking.slot}"
                ) from e
            raise self._to_domain_error(e, reasons, booking) from e

    def delete(self, booking: Booking) -> None:
        """予約を削除する"""
        transact_items = [
            self._delete(
                self._key(booking.id),
                "version = :expected",
                {":expected": booking.version},
            ),
            self._delete(
                self._slot_key(booking.slot),
                "booking_id = :booking_id",
                {":booking_id": str(booking.id)},
            ),
        ]
        try:
            self.client.transact_write_items(TransactItems=transact_items)
        except ClientError as e:
            reasons = self._cancellation_reasons(e)
            if self._condition_failed(reasons, 0):
                raise self._version_error(reasons[0], booking, booking.version) from e
            raise self._to_domain_error(e, reasons, booking) from e

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        try:
            response = self.table.get_item(
                Key=self._key(booking_id),
                ConsistentRead=True,
            )
        except ClientError as e:
            raise StoreException(f"Failed to get booking: {booking_id}") from e
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_user_id(self, user_id: UserId) -> list[Booking]:
        """ユーザーIDで予約を検索する（GSI1 のため結果整合）"""
        items = self._query_all(
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq(f"USER#{user_id}"),
        )
        return [self._to_entity(item) for item in items]

    def find_by_resource_id(self, resource_id: ResourceId) -> list[Booking]:
        """リソースIDで予約を検索する（開始時刻順）"""
        items = self._query_all(
            KeyConditionExpression=Key("PK").eq(f"RESOURCE#{resource_id}")
            & Key("SK").begins_with("SLOT#"),
            ConsistentRead=True,
        )
        return [self._to_entity(item) for item in items]

    def find_by_slot(self, slot: Slot) -> Booking | None:
        """枠を占有している予約を検索"""
        try:
            response = self.table.get_item(
                Key=self._slot_key(slot),
                ConsistentRead=True,
            )
        except ClientError as e:
            raise StoreException(f"Failed to get slot: {slot}") from e
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def _query_all(self, **kwargs) -> list[dict]:
        """ページネーションを辿って全件取得する"""
        items: list[dict] = []
        while True:
            try:
                response = self.table.query(**kwargs)
            except ClientError as e:
                raise StoreException("Failed to query bookings") from e
            items.extend(response.get("Items", []))
            last_evaluated_key = response.get("LastEvaluatedKey")
            if not last_evaluated_key:
                return items
            kwargs["ExclusiveStartKey"] = last_evaluated_key

    def _put(
        self, item: dict, condition: str, values: dict | None = None
    ) -> dict:
        put: dict = {
            "TableName": self.table_name,
            "Item": self._serialize(item),
            "ConditionExpression": condition,
            "ReturnValuesOnConditionCheckFailure": "ALL_OLD",
        }
        if values:
            put["ExpressionAttributeValues"] = self._serialize(values)
        return {"Put": put}

    def _delete(self, key: dict, condition: str, values: dict | None = None) -> dict:
        delete: dict = {
            "TableName": self.table_name,
            "Key": self._serialize(key),
            "ConditionExpression": condition,
            "ReturnValuesOnConditionCheckFailure": "ALL_OLD",
        }
        if values:
            delete["ExpressionAttributeValues"] = self._serialize(values)
        return {"Delete": delete}

    @staticmethod
    def _serialize(attributes: dict) -> dict:
        return {k: _serializer.serialize(v) for k, v in attributes.items()}

    @staticmethod
    def _cancellation_reasons(error: ClientError) -> list[dict]:
        if error.response["Error"]["Code"] != "TransactionCanceledException":
            return []
        return error.response.get("CancellationReasons", [])

    @staticmethod
    def _condition_failed(reasons: list[dict], index: int) -> bool:
        return (
            index < len(reasons)
            and reasons[index].get("Code") == "ConditionalCheckFailed"
        )

    @staticmethod
    def _version_error(
        reason: dict, booking: Booking, expected_version: int
    ) -> DomainException:
        # 旧アイテムが返らない = 既に削除済み
        if not reason.get("Item"):
            return ResourceNotFoundException(f"Booking not found: {booking.id}")
        return OptimisticLockException(
            f"Booking version conflict: "
            f"expected {expected_version}, "
            f"booking_id={booking.id}"
        )

    @staticmethod
    def _to_domain_error(
        error: ClientError, reasons: list[dict], booking: Booking
    ) -> DomainException:
        if any(r.get("Code") == "TransactionConflict" for r in reasons):
            return OptimisticLockException(
                f"Concurrent transaction on booking: {booking.id}"
            )
        return StoreException(
            f"Failed to write booking: {booking.id} "
            f"({error.response['Error']['Code']})"
        )

    @staticmethod
    def _key(booking_id: BookingId) -> dict:
        return {"PK": f"BOOKING#{booking_id}", "SK": "BOOKING"}

    @staticmethod
    def _slot_key(slot: Slot) -> dict:
        return {
            "PK": f"RESOURCE#{slot.resource_id}",
            "SK": f"SLOT#{int(slot.start_time):020d}",
        }

    @staticmethod
    def _attributes(booking: Booking) -> dict:
        return {
            "booking_id": str(booking.id),
            "user_id": str(booking.user_id),
            "resource_id": str(booking.resource_id),
            "start_time_epoch": int(booking.start_time),
            "version": booking.version,
        }

    def _to_item(self, booking: Booking) -> dict:
        return {
            **self._key(booking.id),
            "entity_type": "BOOKING",
            **self._attributes(booking),
            "GSI1PK": f"USER#{booking.user_id}",
            "GSI1SK": f"BOOKING#{booking.id}",
        }

    def _to_slot_item(self, booking: Booking) -> dict:
        return {
            **self._slot_key(booking.slot),
            "entity_type": "SLOT",
            **self._attributes(booking),
        }

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Booking(
            id=BookingId(value=item["booking_id"]),
            user_id=UserId(value=item["user_id"]),
            resource_id=ResourceId(value=item["resource_id"]),
            start_time=StartTimeEpoch(value=int(item["start_time_epoch"])),
            version=int(item["version"]),
        )
