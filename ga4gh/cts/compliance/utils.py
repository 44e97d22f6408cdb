"""
Lookups of the well-known objects in the compliance dataset, and small
helpers shared by the compliance tests.
"""
from __future__ import division
from __future__ import print_function
from __future__ import unicode_literals

import logging

import ga4gh.cts.ctsconfig as ctsconfig
import ga4gh.cts.exceptions as exceptions

log = logging.getLogger(__name__)


def a_single(value):
    """
    Returns a list holding only the specified value.
    """
    return [value]


def catch_ga_wrapper_exception(func, *args, **kwargs):
    """
    Calls func with the specified arguments and returns the
    GAWrapperException it raises. Raises an AssertionError if it
    returns normally.
    """
    try:
        func(*args, **kwargs)
    except exceptions.GAWrapperException as exception:
        return exception
    raise AssertionError(
        "Expected {} to raise GAWrapperException".format(
            getattr(func, "__name__", func)))


def _findByName(objects, name, description):
    for obj in objects:
        if obj.name == name:
            return obj
    raise AssertionError(
        "No {} named '{}' found on the server".format(description, name))


def _first(objects, description):
    for obj in objects:
        return obj
    raise AssertionError("No {} found on the server".format(description))


def get_dataset_id(client, dataset_name=ctsconfig.BaseConfig.DATASET_NAME):
    """
    Returns the ID of the compliance dataset.
    """
    dataset = _findByName(client.search_datasets(), dataset_name, "dataset")
    log.debug("dataset '%s' has ID %s", dataset_name, dataset.id)
    return dataset.id


def get_variant_set_id(
        client, dataset_name=ctsconfig.BaseConfig.DATASET_NAME,
        variant_set_name=ctsconfig.BaseConfig.VARIANT_SET_NAME):
    """
    Returns the ID of the annotated variant set in the compliance dataset.
    """
    datasetId = get_dataset_id(client, dataset_name)
    variantSet = _findByName(
        client.search_variant_sets(datasetId), variant_set_name,
        "variant set")
    return variantSet.id


def get_variant_annotation_set_id(
        client, dataset_name=ctsconfig.BaseConfig.DATASET_NAME,
        variant_set_name=ctsconfig.BaseConfig.VARIANT_SET_NAME):
    """
    Returns the ID of the first variant annotation set of the annotated
    variant set in the compliance dataset.
    """
    variantSetId = get_variant_set_id(
        client, dataset_name, variant_set_name)
    variantAnnotationSet = _first(
        client.search_variant_annotation_sets(variantSetId),
        "variant annotation set in variant set {}".format(variantSetId))
    log.debug(
        "variant annotation set for '%s' has ID %s", variant_set_name,
        variantAnnotationSet.id)
    return variantAnnotationSet.id


def get_rna_quantification_set_id(
        client, dataset_name=ctsconfig.BaseConfig.DATASET_NAME,
        rna_quantification_set_name=(
            ctsconfig.BaseConfig.RNA_QUANTIFICATION_SET_NAME)):
    """
    Returns the ID of the RNA quantification set in the compliance dataset.
    """
    datasetId = get_dataset_id(client, dataset_name)
    rnaQuantificationSet = _findByName(
        client.search_rna_quantification_sets(datasetId),
        rna_quantification_set_name, "RNA quantification set")
    return rnaQuantificationSet.id


def get_rna_quantification_id(
        client, dataset_name=ctsconfig.BaseConfig.DATASET_NAME,
        rna_quantification_set_name=(
            ctsconfig.BaseConfig.RNA_QUANTIFICATION_SET_NAME)):
    """
    Returns the ID of the first RNA quantification in the compliance
    dataset's RNA quantification set.
    """
    rnaQuantificationSetId = get_rna_quantification_set_id(
        client, dataset_name, rna_quantification_set_name)
    rnaQuantification = _first(
        client.search_rna_quantifications(rnaQuantificationSetId),
        "RNA quantification in set {}".format(rnaQuantificationSetId))
    return rnaQuantification.id


def get_all_rna_quantifications(client, rna_quantification_set_id):
    """
    Returns a list of every RnaQuantification in the specified set,
    fetching as many pages as the server needs.
    """
    return list(client.search_rna_quantifications(rna_quantification_set_id))
