import unittest
from ramo.core.labels import field_label


class TestFieldLabel(unittest.TestCase):

    def test_metadata_label_wins(self):
        self.assertEqual(field_label("Payload__c", "Request Payload", "ignored"), "Request Payload")

    def test_display_value(self):
        self.assertEqual(field_label("Payload__c", None, "Payload"), "Payload")

    def test_api_name_fallback(self):
        self.assertEqual(field_label("Response_Body__c"), "Response Body")
        self.assertEqual(field_label("data"), "data")

    def test_default(self):
        self.assertEqual(field_label(None), "JSON Field")
        self.assertEqual(field_label("__c"), "JSON Field")
