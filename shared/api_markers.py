# shared/api_markers.py
"""
API 문서화용 마커 시리얼라이저

@extend_schema 에서 요청 바디가 없거나 응답이 단순 메시지인 엔드포인트의
스키마를 표현하는 데 쓴다.
"""
from rest_framework import serializers


class EmptySerializer(serializers.Serializer):
    """본문이 없는 요청에 쓰는 더미 시리얼라이저 (예: 상품 생성 POST)"""
    pass


class MessageSerializer(serializers.Serializer):
    """{"message": "..."} 에러/안내 응답"""
    message = serializers.CharField()
