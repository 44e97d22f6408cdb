"""
Definitions of the GA4GH protocol types used by the compliance suite.

The message classes are built at import time from a file descriptor declared
below, so the suite only depends on the protobuf runtime. Field names follow
the GA4GH schema and serialise to the same camelCase JSON names as the
generated classes.
"""
from __future__ import division
from __future__ import print_function
from __future__ import unicode_literals

import json
import inspect
from sys import modules

import google.protobuf.descriptor_pb2 as descriptor_pb2
import google.protobuf.descriptor_pool as descriptor_pool
import google.protobuf.json_format as json_format
import google.protobuf.message as message
import google.protobuf.message_factory as message_factory
from google.protobuf.internal import enum_type_wrapper

version = "0.6.0a10"

PACKAGE = "ga4gh"
FILE_NAME = "ga4gh/cts/compliance.proto"

_fieldTypes = {
    "string": descriptor_pb2.FieldDescriptorProto.TYPE_STRING,
    "bool": descriptor_pb2.FieldDescriptorProto.TYPE_BOOL,
    "int32": descriptor_pb2.FieldDescriptorProto.TYPE_INT32,
    "int64": descriptor_pb2.FieldDescriptorProto.TYPE_INT64,
    "float": descriptor_pb2.FieldDescriptorProto.TYPE_FLOAT,
    "double": descriptor_pb2.FieldDescriptorProto.TYPE_DOUBLE,
}

_enums = [
    ("ExpressionUnit", ["EXPRESSION_UNIT_UNSPECIFIED", "FPKM", "TPM"]),
]

# Each message is (name, fields); each field is (name, type) or
# (name, type, oneofName). Types are a scalar, enum or message name,
# optionally prefixed with "repeated ", or "map<key, value>".
_messages = [
    # common
    ("OntologyTerm", [
        ("term_id", "string"),
        ("term", "string")]),
    ("AttributeValue", [
        ("string_value", "string", "value"),
        ("int64_value", "int64", "value"),
        ("int32_value", "int32", "value"),
        ("bool_value", "bool", "value"),
        ("double_value", "double", "value")]),
    ("AttributeValueList", [
        ("values", "repeated AttributeValue")]),
    ("Attributes", [
        ("attr", "map<string, AttributeValueList>")]),
    ("GAException", [
        ("message", "string"),
        ("error_code", "int32")]),
    # metadata
    ("Dataset", [
        ("id", "string"),
        ("name", "string"),
        ("description", "string"),
        ("attributes", "Attributes")]),
    ("Analysis", [
        ("id", "string"),
        ("name", "string"),
        ("description", "string"),
        ("created", "string"),
        ("updated", "string"),
        ("type", "string"),
        ("software", "repeated string"),
        ("attributes", "Attributes")]),
    # variants
    ("VariantSet", [
        ("id", "string"),
        ("name", "string"),
        ("dataset_id", "string"),
        ("reference_set_id", "string"),
        ("attributes", "Attributes")]),
    # allele annotations
    ("VariantAnnotationSet", [
        ("id", "string"),
        ("variant_set_id", "string"),
        ("name", "string"),
        ("analysis", "Analysis"),
        ("attributes", "Attributes")]),
    ("AlleleLocation", [
        ("start", "int64"),
        ("reference_sequence", "string"),
        ("alternate_sequence", "string")]),
    ("HGVSAnnotation", [
        ("genomic", "string"),
        ("transcript", "string"),
        ("protein", "string")]),
    ("AnalysisResult", [
        ("analysis_id", "string"),
        ("result", "string"),
        ("score", "int32")]),
    ("TranscriptEffect", [
        ("id", "string"),
        ("feature_id", "string"),
        ("alternate_bases", "string"),
        ("effects", "repeated OntologyTerm"),
        ("hgvs_annotation", "HGVSAnnotation"),
        ("cdna_location", "AlleleLocation"),
        ("cds_location", "AlleleLocation"),
        ("protein_location", "AlleleLocation"),
        ("analysis_results", "repeated AnalysisResult"),
        ("attributes", "Attributes")]),
    ("VariantAnnotation", [
        ("id", "string"),
        ("variant_id", "string"),
        ("variant_annotation_set_id", "string"),
        ("created", "string"),
        ("transcript_effects", "repeated TranscriptEffect"),
        ("attributes", "Attributes")]),
    # rna quantifications
    ("RnaQuantificationSet", [
        ("id", "string"),
        ("dataset_id", "string"),
        ("name", "string"),
        ("attributes", "Attributes")]),
    ("RnaQuantification", [
        ("id", "string"),
        ("name", "string"),
        ("description", "string"),
        ("read_group_ids", "repeated string"),
        ("feature_set_ids", "repeated string"),
        ("rna_quantification_set_id", "string"),
        ("biosample_id", "string"),
        ("attributes", "Attributes")]),
    ("ExpressionLevel", [
        ("id", "string"),
        ("name", "string"),
        ("rna_quantification_id", "string"),
        ("feature_id", "string"),
        ("raw_read_count", "float"),
        ("expression", "float"),
        ("is_normalized", "bool"),
        ("units", "ExpressionUnit"),
        ("score", "float"),
        ("conf_interval_low", "float"),
        ("conf_interval_high", "float"),
        ("attributes", "Attributes")]),
    # service messages
    ("SearchDatasetsRequest", [
        ("page_size", "int32"),
        ("page_token", "string")]),
    ("SearchDatasetsResponse", [
        ("datasets", "repeated Dataset"),
        ("next_page_token", "string")]),
    ("SearchVariantSetsRequest", [
        ("dataset_id", "string"),
        ("page_size", "int32"),
        ("page_token", "string")]),
    ("SearchVariantSetsResponse", [
        ("variant_sets", "repeated VariantSet"),
        ("next_page_token", "string")]),
    ("SearchVariantAnnotationSetsRequest", [
        ("variant_set_id", "string"),
        ("page_size", "int32"),
        ("page_token", "string")]),
    ("SearchVariantAnnotationSetsResponse", [
        ("variant_annotation_sets", "repeated VariantAnnotationSet"),
        ("next_page_token", "string")]),
    ("SearchVariantAnnotationsRequest", [
        ("variant_annotation_set_id", "string"),
        ("reference_name", "string"),
        ("reference_id", "string"),
        ("start", "int64"),
        ("end", "int64"),
        ("effects", "repeated OntologyTerm"),
        ("feature_ids", "repeated string"),
        ("page_size", "int32"),
        ("page_token", "string")]),
    ("SearchVariantAnnotationsResponse", [
        ("variant_annotations", "repeated VariantAnnotation"),
        ("next_page_token", "string")]),
    ("SearchRnaQuantificationSetsRequest", [
        ("dataset_id", "string"),
        ("page_size", "int32"),
        ("page_token", "string")]),
    ("SearchRnaQuantificationSetsResponse", [
        ("rna_quantification_sets", "repeated RnaQuantificationSet"),
        ("next_page_token", "string")]),
    ("SearchRnaQuantificationsRequest", [
        ("rna_quantification_set_id", "string"),
        ("biosample_id", "string"),
        ("page_size", "int32"),
        ("page_token", "string")]),
    ("SearchRnaQuantificationsResponse", [
        ("rna_quantifications", "repeated RnaQuantification"),
        ("next_page_token", "string")]),
    ("SearchExpressionLevelsRequest", [
        ("rna_quantification_id", "string"),
        ("feature_ids", "repeated string"),
        ("threshold", "float"),
        ("page_size", "int32"),
        ("page_token", "string")]),
    ("SearchExpressionLevelsResponse", [
        ("expression_levels", "repeated ExpressionLevel"),
        ("next_page_token", "string")]),
]


def _toJsonName(name):
    words = name.split("_")
    return words[0] + "".join(word.capitalize() for word in words[1:])


def _qualify(*names):
    return "." + ".".join((PACKAGE,) + names)


def _setFieldType(field, typeName):
    enumNames = [enumName for enumName, _ in _enums]
    if typeName in _fieldTypes:
        field.type = _fieldTypes[typeName]
    elif typeName in enumNames:
        field.type = descriptor_pb2.FieldDescriptorProto.TYPE_ENUM
        field.type_name = _qualify(typeName)
    else:
        field.type = descriptor_pb2.FieldDescriptorProto.TYPE_MESSAGE
        field.type_name = _qualify(typeName)


def _addField(messageProto, number, name, typeSpec, label=None):
    field = messageProto.field.add()
    field.name = name
    field.json_name = _toJsonName(name)
    field.number = number
    field.label = (
        label or descriptor_pb2.FieldDescriptorProto.LABEL_OPTIONAL)
    _setFieldType(field, typeSpec)
    return field


def _addMapField(messageProto, number, name, typeSpec):
    keyType, valueType = [
        part.strip() for part in typeSpec[len("map<"):-1].split(",")]
    entry = messageProto.nested_type.add()
    entry.name = _toJsonName(name)[0].upper() + _toJsonName(name)[1:] + \
        "Entry"
    entry.options.map_entry = True
    _addField(entry, 1, "key", keyType)
    _addField(entry, 2, "value", valueType)
    field = _addField(
        messageProto, number, name, valueType,
        descriptor_pb2.FieldDescriptorProto.LABEL_REPEATED)
    field.type = descriptor_pb2.FieldDescriptorProto.TYPE_MESSAGE
    field.type_name = _qualify(messageProto.name, entry.name)


def _buildFileDescriptorProto():
    fileProto = descriptor_pb2.FileDescriptorProto()
    fileProto.name = FILE_NAME
    fileProto.package = PACKAGE
    fileProto.syntax = "proto3"
    for enumName, valueNames in _enums:
        enumProto = fileProto.enum_type.add()
        enumProto.name = enumName
        for number, valueName in enumerate(valueNames):
            enumProto.value.add(name=valueName, number=number)
    for messageName, fields in _messages:
        messageProto = fileProto.message_type.add()
        messageProto.name = messageName
        oneofNames = []
        for number, fieldSpec in enumerate(fields, 1):
            name, typeSpec = fieldSpec[:2]
            if typeSpec.startswith("map<"):
                _addMapField(messageProto, number, name, typeSpec)
            elif typeSpec.startswith("repeated "):
                _addField(
                    messageProto, number, name, typeSpec.split()[1],
                    descriptor_pb2.FieldDescriptorProto.LABEL_REPEATED)
            else:
                field = _addField(messageProto, number, name, typeSpec)
                if len(fieldSpec) == 3:
                    oneofName = fieldSpec[2]
                    if oneofName not in oneofNames:
                        oneofNames.append(oneofName)
                        messageProto.oneof_decl.add(name=oneofName)
                    field.oneof_index = oneofNames.index(oneofName)
    return fileProto


def _registerProtocolClasses():
    # A private pool keeps these definitions apart from any generated
    # GA4GH schema package loaded in the same process.
    pool = descriptor_pool.DescriptorPool()
    pool.AddSerializedFile(_buildFileDescriptorProto().SerializeToString())
    thisModule = modules[__name__]
    for enumName, _ in _enums:
        enumDescriptor = pool.FindEnumTypeByName(
            "{}.{}".format(PACKAGE, enumName))
        setattr(
            thisModule, enumName,
            enum_type_wrapper.EnumTypeWrapper(enumDescriptor))
    for messageName, _ in _messages:
        messageDescriptor = pool.FindMessageTypeByName(
            "{}.{}".format(PACKAGE, messageName))
        setattr(
            thisModule, messageName,
            message_factory.GetMessageClass(messageDescriptor))
    return pool


descriptorPool = _registerProtocolClasses()


# A map of response objects to the name of the attribute used to
# store the values returned.
_valueListNameMap = {
    SearchDatasetsResponse: "datasets",  # noqa
    SearchVariantSetsResponse: "variant_sets",  # noqa
    SearchVariantAnnotationSetsResponse: "variant_annotation_sets",  # noqa
    SearchVariantAnnotationsResponse: "variant_annotations",  # noqa
    SearchRnaQuantificationSetsResponse: "rna_quantification_sets",  # noqa
    SearchRnaQuantificationsResponse: "rna_quantifications",  # noqa
    SearchExpressionLevelsResponse: "expression_levels",  # noqa
}


def getValueListName(protocolResponseClass):
    """
    Returns the name of the attribute in the specified protocol class
    that is used to hold the values in a search response.
    """
    return _valueListNameMap[protocolResponseClass]


def setAttribute(values, value):
    """
    Appends the specified value to an AttributeValueList's values,
    choosing the AttributeValue member from the value's type.
    """
    if isinstance(value, bool):
        values.add().bool_value = value
    elif isinstance(value, int):
        values.add().int64_value = value
    elif isinstance(value, float):
        values.add().double_value = value
    elif isinstance(value, (list, tuple)):
        for item in value:
            setAttribute(values, item)
    else:
        values.add().string_value = str(value)


def getAttribute(values):
    """
    Returns the python values held in an AttributeValueList's values.
    Values with nothing set are skipped.
    """
    ret = []
    for value in values:
        kind = value.WhichOneof("value")
        if kind is not None:
            ret.append(getattr(value, kind))
    return ret


def toJson(protoObject, indent=None):
    """
    Serialises a protobuf object as json
    """
    js = json_format.MessageToDict(protoObject, True)
    return json.dumps(js, indent=indent)


def toJsonDict(protoObject):
    """
    Converts a protobuf object to the raw attributes
    i.e. a key/value dictionary
    """
    return json.loads(toJson(protoObject))


def fromJson(json, protoClass, ignoreUnknownFields=False):
    """
    Deserialise json into an instance of protobuf class
    """
    return json_format.Parse(
        json, protoClass(), ignore_unknown_fields=ignoreUnknownFields)


def validate(json, protoClass):
    """
    Check that json represents data that could be used to make
    a given protobuf class
    """
    try:
        fromJson(json, protoClass)
        # The json conversion automatically validates
        return True
    except json_format.ParseError:
        return False


def getProtocolClasses(superclass=message.Message):
    """
    Returns all the protocol classes that are subclasses of the
    specified superclass.
    """
    superclasses = set([message.Message])
    thisModule = modules[__name__]
    subclasses = []
    for name, class_ in inspect.getmembers(thisModule):
        if ((inspect.isclass(class_) and
                issubclass(class_, superclass) and
                class_ not in superclasses)):
            subclasses.append(class_)
    return subclasses
