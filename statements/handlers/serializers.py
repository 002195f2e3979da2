"""Serializers for turning API payloads into domain models and back."""

from rest_framework import serializers

from statements.domain import Performance, PerformanceSummary, Play, PlayId
from statements.stores.memory_store import InMemoryPlayCatalog


class PlaySerializer(serializers.Serializer):
    """Play entry of the request catalog."""

    name = serializers.CharField(trim_whitespace=False)
    type = serializers.CharField()


class PerformanceSerializer(serializers.Serializer):
    """Performance entry, keyed by ``playID`` on the wire."""

    playID = serializers.CharField(source="play_id")
    audience = serializers.IntegerField(min_value=0)


class StatementRequestSerializer(serializers.Serializer):
    """Request body for POST /api/statements.

    Play IDs are stripped of surrounding whitespace both in ``performances``
    and in the keys of ``plays`` so the two always match.
    """

    customer = serializers.CharField(trim_whitespace=False)
    performances = PerformanceSerializer(many=True)
    plays = serializers.DictField(child=PlaySerializer())

    def validate_plays(self, value: dict) -> dict:
        if any(not play_id.strip() for play_id in value):
            raise serializers.ValidationError("Play IDs cannot be blank.")
        return value

    def to_summary(self) -> PerformanceSummary:
        data = self.validated_data
        return PerformanceSummary(
            customer=data["customer"],
            performances=tuple(
                Performance(play_id=item["play_id"], audience=item["audience"])
                for item in data["performances"]
            ),
        )

    def to_catalog(self) -> InMemoryPlayCatalog:
        return InMemoryPlayCatalog(
            {
                PlayId.from_string(play_id).value: Play(name=play["name"], type=play["type"])
                for play_id, play in self.validated_data["plays"].items()
            }
        )


class StatementLineSerializer(serializers.Serializer):
    """Serializer for StatementLine domain model."""

    play = serializers.CharField(source="play_name")
    audience = serializers.IntegerField()
    amount = serializers.IntegerField(source="amount.cents")
    credits = serializers.IntegerField()


class StatementSerializer(serializers.Serializer):
    """Serializer for Statement domain model. Amounts are in cents."""

    customer = serializers.CharField(trim_whitespace=False)
    lines = StatementLineSerializer(many=True)
    total_amount = serializers.IntegerField(source="total_amount.cents")
    volume_credits = serializers.IntegerField()
