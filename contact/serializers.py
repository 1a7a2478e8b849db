from rest_framework import serializers

DELIMITER = ","


class SubmissionRecordSerializer(serializers.Serializer):
    # Declaration order is the column order of the submissions file.
    fullName = serializers.CharField(source="full_name")
    email = serializers.CharField()
    message = serializers.CharField()
    timestamp = serializers.CharField()

    def to_line(self):
        # Values are joined as-is: a delimiter or newline inside a value is not escaped.
        return DELIMITER.join(self.data.values())
