"""Export hedefleri unit testleri."""

import json
from unittest.mock import MagicMock

from botocore.exceptions import ClientError

from pricelist_engine.engine.sinks import LocalFileSink, S3ExportSink


class TestLocalFileSink:

    def test_writes_indented_json(self, tmp_path):
        sink = LocalFileSink(str(tmp_path / "exports"))
        sink.deliver({"format": "MARS_COMPATIBLE"}, "pricelist_x_2026-10-16.json")
        written = (tmp_path / "exports" / "pricelist_x_2026-10-16.json").read_text(encoding="utf-8")
        assert json.loads(written) == {"format": "MARS_COMPATIBLE"}


class TestS3ExportSink:

    def test_puts_object_under_prefix(self):
        s3 = MagicMock()
        sink = S3ExportSink("bucket", prefix="pricelists/", s3_client=s3)
        sink.deliver({"a": 1}, "file.json")
        kwargs = s3.put_object.call_args.kwargs
        assert kwargs["Bucket"] == "bucket"
        assert kwargs["Key"] == "pricelists/file.json"
        assert json.loads(kwargs["Body"]) == {"a": 1}

    def test_client_error_is_not_raised(self):
        s3 = MagicMock()
        s3.put_object.side_effect = ClientError({"Error": {"Code": "AccessDenied", "Message": "no"}}, "PutObject")
        sink = S3ExportSink("bucket", s3_client=s3)
        sink.deliver({"a": 1}, "file.json")  # ateşle ve unut
        s3.put_object.assert_called_once()
