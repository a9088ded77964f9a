import pytest
from pydantic import ValidationError

from modules.progress.models import EmptyProgressResponse, ProgressRecord, PushResponse
from modules.progress.exceptions import DocumentFieldMissingError


class TestProgressRecord:
    def test_parse_wire_names(self):
        """Should accept the protocol field names."""
        record = ProgressRecord.model_validate({
            "document": "doc1",
            "percentage": 0.42,
            "progress": "/body/DocFragment[12]/body/p[3]",
            "device": "Kobo",
            "device_id": "abc",
        })
        assert record.document_id == "doc1"
        assert record.progress_cursor == "/body/DocFragment[12]/body/p[3]"
        assert record.timestamp is None

    def test_parse_attribute_names(self):
        """Should also accept the descriptive attribute names."""
        record = ProgressRecord.model_validate({
            "document_id": "doc1",
            "percentage": 42.0,
            "progress_cursor": "p123",
            "device": "Kobo",
            "device_id": "abc",
        })
        assert record.document_id == "doc1"
        assert record.progress_cursor == "p123"

    def test_integer_percentage(self):
        """Integral percentages parse as floats."""
        record = ProgressRecord(document="d", percentage=42, progress="p", device="k", device_id="i")
        assert record.percentage == 42.0

    @pytest.mark.parametrize("missing", ["document", "percentage", "progress", "device", "device_id"])
    def test_required_fields(self, missing):
        """Every field except timestamp is required."""
        data = {
            "document": "doc1",
            "percentage": 0.5,
            "progress": "p",
            "device": "Kobo",
            "device_id": "abc",
        }
        del data[missing]
        with pytest.raises(ValidationError):
            ProgressRecord.model_validate(data)

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_percentage_rejected(self, value):
        """Percentages must be finite to serialize back to JSON."""
        with pytest.raises(ValidationError):
            ProgressRecord(document="d", percentage=value, progress="p", device="k", device_id="i")

    def test_non_string_document_rejected(self):
        """Document ids are strings, not numbers."""
        with pytest.raises(ValidationError):
            ProgressRecord(document=123, percentage=0.5, progress="p", device="k", device_id="i")

    def test_to_wire(self):
        """Serialization uses the protocol names."""
        record = ProgressRecord(
            document="doc1", percentage=0.5, progress="p", device="Kobo", device_id="abc", timestamp=7,
        )
        assert record.to_wire() == {
            "document": "doc1",
            "percentage": 0.5,
            "progress": "p",
            "device": "Kobo",
            "device_id": "abc",
            "timestamp": 7,
        }


class TestResponses:
    def test_push_response(self):
        assert PushResponse(document="doc1", timestamp=5).model_dump() == {"document": "doc1", "timestamp": 5}

    def test_empty_progress_response(self):
        assert EmptyProgressResponse(document="doc1").model_dump() == {"document": "doc1"}


class TestDocumentFieldMissingError:
    def test_protocol_code(self):
        error = DocumentFieldMissingError("a:b")
        assert error.status_code == 403
        assert error.to_dict() == {"code": 2004, "message": "Field 'document' not provided."}
