from rest_framework import serializers


class BatchUploadSerializer(serializers.Serializer):
	file = serializers.FileField()


class SendQrCodesQuerySerializer(serializers.Serializer):
	fileId = serializers.CharField(source='file_id')


class ScanQuerySerializer(serializers.Serializer):
	name = serializers.CharField(trim_whitespace=False)
	email = serializers.CharField(trim_whitespace=False)
	admissionId = serializers.CharField(source='admission_id', trim_whitespace=False)
	phoneNumber = serializers.CharField(source='phone_number', trim_whitespace=False)
	signature = serializers.CharField(required=False, allow_blank=True)
