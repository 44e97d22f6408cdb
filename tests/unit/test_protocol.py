"""
Tests for the protocol types and their JSON mapping
"""
from __future__ import division
from __future__ import print_function
from __future__ import unicode_literals

import json
import unittest

import google.protobuf.json_format as json_format
import google.protobuf.message as message

import ga4gh.cts.protocol as protocol


class TestProtocolClasses(unittest.TestCase):

    def testSearchResponsesHaveValueLists(self):
        responseClasses = [
            class_ for class_ in protocol.getProtocolClasses()
            if class_.DESCRIPTOR.name.endswith("Response")]
        self.assertEqual(len(responseClasses), 7)
        for class_ in responseClasses:
            valueListName = protocol.getValueListName(class_)
            response = class_()
            self.assertEqual(len(getattr(response, valueListName)), 0)
            self.assertEqual(response.next_page_token, "")

    def testAllClassesAreMessages(self):
        classes = protocol.getProtocolClasses()
        self.assertIn(protocol.RnaQuantification, classes)
        self.assertIn(protocol.VariantAnnotation, classes)
        self.assertIn(protocol.GAException, classes)
        for class_ in classes:
            self.assertTrue(issubclass(class_, message.Message))

    def testExpressionUnit(self):
        self.assertEqual(protocol.ExpressionUnit.Value("FPKM"), 1)
        self.assertEqual(protocol.ExpressionUnit.Name(2), "TPM")


class TestJson(unittest.TestCase):

    def testCamelCaseNames(self):
        request = protocol.SearchVariantAnnotationsRequest()
        request.variant_annotation_set_id = "vas"
        request.feature_ids.append("NR_046018.2")
        request.page_size = 5
        jsonDict = protocol.toJsonDict(request)
        self.assertEqual(jsonDict["variantAnnotationSetId"], "vas")
        self.assertEqual(jsonDict["featureIds"], ["NR_046018.2"])
        self.assertEqual(jsonDict["pageSize"], 5)
        # defaults are written out too
        self.assertEqual(jsonDict["pageToken"], "")

    def testFromJson(self):
        jsonString = json.dumps({
            "id": "rq1",
            "readGroupIds": ["rg1", "rg2"],
            "rnaQuantificationSetId": "rqs1"})
        rnaQuantification = protocol.fromJson(
            jsonString, protocol.RnaQuantification)
        self.assertEqual(rnaQuantification.id, "rq1")
        self.assertEqual(list(rnaQuantification.read_group_ids), ["rg1", "rg2"])
        self.assertEqual(rnaQuantification.rna_quantification_set_id, "rqs1")
        self.assertEqual(
            protocol.fromJson(
                protocol.toJson(rnaQuantification),
                protocol.RnaQuantification),
            rnaQuantification)

    def testUnknownFields(self):
        jsonString = json.dumps({"id": "d1", "notAField": 1})
        with self.assertRaises(json_format.ParseError):
            protocol.fromJson(jsonString, protocol.Dataset)
        dataset = protocol.fromJson(
            jsonString, protocol.Dataset, ignoreUnknownFields=True)
        self.assertEqual(dataset.id, "d1")

    def testValidate(self):
        self.assertTrue(protocol.validate(
            json.dumps({"message": "x", "errorCode": 3}),
            protocol.GAException))
        self.assertFalse(protocol.validate(
            json.dumps({"errorCode": "not a number"}),
            protocol.GAException))
        self.assertFalse(protocol.validate("{", protocol.GAException))


class TestAttributes(unittest.TestCase):

    def testSetAndGet(self):
        effect = protocol.TranscriptEffect()
        values = effect.attributes.attr["impact"].values
        protocol.setAttribute(values, "MODIFIER")
        protocol.setAttribute(values, [3, 1.5, True])
        self.assertEqual(
            protocol.getAttribute(values), ["MODIFIER", 3, 1.5, True])
        self.assertEqual(values[0].WhichOneof("value"), "string_value")
        self.assertEqual(values[1].WhichOneof("value"), "int64_value")
        self.assertEqual(values[3].WhichOneof("value"), "bool_value")

    def testAttributesJson(self):
        effect = protocol.TranscriptEffect()
        protocol.setAttribute(
            effect.attributes.attr["impact"].values, "HIGH")
        jsonDict = protocol.toJsonDict(effect)
        self.assertEqual(
            jsonDict["attributes"],
            {"attr": {"impact": {"values": [{"stringValue": "HIGH"}]}}})
        parsed = protocol.fromJson(
            json.dumps(jsonDict), protocol.TranscriptEffect)
        self.assertEqual(
            protocol.getAttribute(parsed.attributes.attr["impact"].values),
            ["HIGH"])

    def testUnsetValuesSkipped(self):
        attributes = protocol.Attributes()
        values = attributes.attr["empty"].values
        values.add()
        self.assertEqual(protocol.getAttribute(values), [])
