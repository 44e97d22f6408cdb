"""
Client classes used by the compliance suite to talk to a GA4GH server.
"""
from __future__ import division
from __future__ import print_function
from __future__ import unicode_literals

import logging

import requests

import ga4gh.cts.ctsconfig as ctsconfig
import ga4gh.cts.exceptions as exceptions
import ga4gh.cts.pb as pb
import ga4gh.cts.protocol as protocol


class ProtocolMethods(object):
    """
    A group of protocol calls for one area of the API. Each call takes a
    protocol request object (or an ID) and makes exactly one round trip
    to the server, returning the protocol response object.
    """
    def __init__(self, client):
        self._client = client

    def _search(self, protocol_request, object_name, protocol_response_class):
        return self._client._run_search_page_request(
            protocol_request, object_name, protocol_response_class)

    def _get(self, object_name, protocol_response_class, id_):
        return self._client._run_get_request(
            object_name, protocol_response_class, id_)


class MetadataMethods(ProtocolMethods):

    def search_datasets(self, request):
        return self._search(
            request, "datasets", protocol.SearchDatasetsResponse)

    def get_dataset(self, dataset_id):
        return self._get("datasets", protocol.Dataset, dataset_id)


class VariantMethods(ProtocolMethods):

    def search_variant_sets(self, request):
        return self._search(
            request, "variantsets", protocol.SearchVariantSetsResponse)

    def get_variant_set(self, variant_set_id):
        """
        Fetches the VariantSet with the specified ID.
        """
        return self.variants.get_variant_set(variant_set_id)

    def get_variant_annotation_set(self, variant_annotation_set_id):
        """
        Fetches the VariantAnnotationSet with the specified ID, including
        the analysis that produced it.
        """
        return self.variant_annotations.get_variant_annotation_set(
            variant_annotation_set_id)

    def search_variant_annotations(self, request):
        """
        Runs the specified SearchVariantAnnotationsRequest and returns the
        single page of results the server sends back.
        """
        return self._search(
            request, "variantannotations",
            protocol.SearchVariantAnnotationsResponse)


class RnaQuantificationMethods(ProtocolMethods):

    def search_rna_quantification_sets(self, request):
        return self._search(
            request, "rnaquantificationsets",
            protocol.SearchRnaQuantificationSetsResponse)

    def get_rna_quantification_set(self, rna_quantification_set_id):
        return self._get(
            "rnaquantificationsets", protocol.RnaQuantificationSet,
            rna_quantification_set_id)

    def search_rna_quantifications(self, request):
        return self._search(
            request, "rnaquantifications",
            protocol.SearchRnaQuantificationsResponse)

    def get_rna_quantification(self, rna_quantification_id):
        """
        Runs GET /rnaquantifications/{id} and returns the
        RnaQuantification the server sends back.
        """
        return self._get(
            "rnaquantifications", protocol.RnaQuantification,
            rna_quantification_id)

    def search_expression_levels(self, request):
        return self._search(
            request, "expressionlevels",
            protocol.SearchExpressionLevelsResponse)

    def get_expression_level(self, expression_level_id):
        return self._get(
            "expressionlevels", protocol.ExpressionLevel,
            expression_level_id)


class AbstractClient(object):
    """
    The abstract superclass of GA4GH Client objects.

    The per-area attributes (``metadata``, ``variants``,
    ``variant_annotations`` and ``rna_quantifications``) give one round
    trip per call; the ``search_*`` methods defined here follow the
    nextPageToken across pages and yield every object.
    """

    def __init__(self, log_level=0, ignore_unknown_fields=True):
        self._page_size = None
        self._log_level = log_level
        self._ignore_unknown_fields = ignore_unknown_fields
        self._protocol_bytes_received = 0
        self._logger = logging.getLogger(__name__)
        self._logger.setLevel(log_level)
        self.metadata = MetadataMethods(self)
        self.variants = VariantMethods(self)
        self.variant_annotations = VariantAnnotationMethods(self)
        self.rna_quantifications = RnaQuantificationMethods(self)

    def _deserialize_response(
            self, json_response_string, protocol_response_class):
        self._protocol_bytes_received += len(json_response_string)
        self._logger.debug("response:{}".format(json_response_string))
        if not json_response_string:
            raise exceptions.EmptyResponseException()
        return protocol.fromJson(
            json_response_string, protocol_response_class,
            self._ignore_unknown_fields)

    def _run_search_page_request(
            self, protocol_request, object_name, protocol_response_class):
        """
        Runs a complete transaction with the server to obtain a single
        page of search results.
        """
        raise NotImplementedError()

    def _run_get_request(self, object_name, protocol_response_class, id_):
        """
        Requests an object from the server and returns the object of
        type protocol_response_class that has id id_.
        Used for requests where a single object is the expected response.
        """
        raise NotImplementedError()

    def _run_search_request(
            self, protocol_request, object_name, protocol_response_class):
        """
        Runs the specified request at the specified object_name and
        instantiates an object of the specified class. We yield each object in
        listAttr.  If pages of results are present, repeat this process
        until the pageToken is null.
        """
        not_done = True
        while not_done:
            response_object = self._run_search_page_request(
                protocol_request, object_name, protocol_response_class)
            value_list = getattr(
                response_object,
                protocol.getValueListName(protocol_response_class))
            for extract in value_list:
                yield extract
            not_done = bool(response_object.next_page_token)
            protocol_request.page_token = response_object.next_page_token

    def get_page_size(self):
        """
        Returns the suggested maximum size of pages of results returned by
        the server.
        """
        return self._page_size

    def set_page_size(self, page_size):
        """
        Sets the requested maximum size of pages of results returned by the
        server to the specified value.
        """
        self._page_size = page_size

    def get_protocol_bytes_received(self):
        """
        Returns the total number of protocol bytes received from the server
        by this client.

        :return: The number of bytes consumed by protocol traffic read from
            the server during the lifetime of this client.
        :rtype: int
        """
        return self._protocol_bytes_received

    def get_dataset(self, dataset_id):
        """
        Returns the Dataset with the specified ID from the server.

        :param str dataset_id: The ID of the Dataset of interest.
        :return: The Dataset of interest.
        :rtype: :class:`ga4gh.cts.protocol.Dataset`
        """
        return self.metadata.get_dataset(dataset_id)

    def get_variant_set(self, variant_set_id):
        """
        Fetches the VariantSet with the specified ID.
        """
        return self.variants.get_variant_set(variant_set_id)

    def get_variant_annotation_set(self, variant_annotation_set_id):
        """
        Fetches the VariantAnnotationSet with the specified ID, together
        with the analysis that produced it.
        """
        return self.variant_annotations.get_variant_annotation_set(
            variant_annotation_set_id)

    def get_rna_quantification_set(self, rna_quantification_set_id):
        """
        Returns the RnaQuantificationSet with the specified ID from the server.

        :param str rna_quantification_set_id: The ID of the
            RnaQuantificationSet of interest.
        :return: The RnaQuantificationSet of interest.
        :rtype: :class:`ga4gh.cts.protocol.RnaQuantificationSet`
        """
        return self.rna_quantifications.get_rna_quantification_set(
            rna_quantification_set_id)

    def get_rna_quantification(self, rna_quantification_id):
        """
        Returns the RnaQuantification with the specified ID from the server.

        :param str rna_quantification_id: The ID of the RnaQuantification of
            interest.
        :return: The RnaQuantification of interest.
        :rtype: :class:`ga4gh.cts.protocol.RnaQuantification`
        """
        return self.rna_quantifications.get_rna_quantification(
            rna_quantification_id)

    def get_expression_level(self, expression_level_id):
        """
        Fetches the ExpressionLevel with the specified ID.
        """
        return self.rna_quantifications.get_expression_level(
            expression_level_id)

    def search_datasets(self):
        """
        Returns an iterator over the Datasets on the server.

        :return: An iterator over the :class:`ga4gh.cts.protocol.Dataset`
            objects on the server.
        """
        request = protocol.SearchDatasetsRequest()
        request.page_size = pb.int(self._page_size)
        return self._run_search_request(
            request, "datasets", protocol.SearchDatasetsResponse)

    def search_variant_sets(self, dataset_id):
        """
        Returns an iterator over the VariantSets fulfilling the specified
        conditions from the specified Dataset.

        :param str dataset_id: The ID of the
            :class:`ga4gh.cts.protocol.Dataset` of interest.
        :return: An iterator over the :class:`ga4gh.cts.protocol.VariantSet`
            objects defined by the query parameters.
        """
        request = protocol.SearchVariantSetsRequest()
        request.dataset_id = dataset_id
        request.page_size = pb.int(self._page_size)
        return self._run_search_request(
            request, "variantsets", protocol.SearchVariantSetsResponse)

    def search_variant_annotation_sets(self, variant_set_id):
        """
        Returns an iterator over the Annotation Sets fulfilling the specified
        conditions from the specified variant set.

        :param str variant_set_id: The ID of the
            :class:`ga4gh.cts.protocol.VariantSet` of interest.
        :return: An iterator over the
            :class:`ga4gh.cts.protocol.VariantAnnotationSet` objects defined
            by the query parameters.
        """
        request = protocol.SearchVariantAnnotationSetsRequest()
        request.variant_set_id = variant_set_id
        request.page_size = pb.int(self._page_size)
        return self._run_search_request(
            request, "variantannotationsets",
            protocol.SearchVariantAnnotationSetsResponse)

    def search_variant_annotations(
            self, variant_annotation_set_id, reference_name="",
            reference_id="", start=0, end=0, effects=(), feature_ids=()):
        """
        Returns an iterator over the Variant Annotations fulfilling
        the specified conditions from the specified VariantAnnotationSet.

        :param str variant_annotation_set_id: The ID of the
            :class:`ga4gh.cts.protocol.VariantAnnotationSet` of interest.
        :param int start: Required. The beginning of the window (0-based,
            inclusive) for which overlapping variants should be returned.
        :param int end: Required. The end of the window (0-based, exclusive)
            for which overlapping variants should be returned.
        :param str reference_name: The name of the reference we wish to
            return annotations from.
        :param list effects: Dictionaries of OntologyTerm fields; only
            annotations with one of these effects are returned. Each must
            have a term_id.
        :param list feature_ids: Only return annotations with a transcript
            effect on one of these features.

        :return: An iterator over the
            :class:`ga4gh.cts.protocol.VariantAnnotation` objects
            defined by the query parameters.
        :rtype: iter
        """
        request = protocol.SearchVariantAnnotationsRequest()
        request.variant_annotation_set_id = variant_annotation_set_id
        request.reference_name = reference_name
        request.reference_id = reference_id
        request.start = start
        request.end = end
        for effect in effects:
            request.effects.add().CopyFrom(protocol.OntologyTerm(**effect))
        for effect in request.effects:
            if not effect.term_id:
                raise exceptions.BadRequestException(
                    "Each ontology term should have an id set")
        request.feature_ids.extend(feature_ids)
        request.page_size = pb.int(self._page_size)
        return self._run_search_request(
            request, "variantannotations",
            protocol.SearchVariantAnnotationsResponse)

    def search_rna_quantification_sets(self, dataset_id):
        """
        Returns an iterator over the RnaQuantificationSet objects from the
        server
        """
        request = protocol.SearchRnaQuantificationSetsRequest()
        request.dataset_id = dataset_id
        request.page_size = pb.int(self._page_size)
        return self._run_search_request(
            request, "rnaquantificationsets",
            protocol.SearchRnaQuantificationSetsResponse)

    def search_rna_quantifications(
            self, rna_quantification_set_id="", biosample_id=""):
        """
        Returns an iterator over the RnaQuantification objects from the server

        :param str rna_quantification_set_id: The ID of the
            :class:`ga4gh.cts.protocol.RnaQuantificationSet` of interest.
        """
        request = protocol.SearchRnaQuantificationsRequest()
        request.rna_quantification_set_id = rna_quantification_set_id
        if biosample_id:
            request.biosample_id = biosample_id
        request.page_size = pb.int(self._page_size)
        return self._run_search_request(
            request, "rnaquantifications",
            protocol.SearchRnaQuantificationsResponse)

    def search_expression_levels(
            self, rna_quantification_id="", feature_ids=(), threshold=0.0):
        """
        Yields the ExpressionLevels of the specified RnaQuantification
        whose expression is at least threshold, optionally limited to the
        features in feature_ids.
        """
        request = protocol.SearchExpressionLevelsRequest()
        request.rna_quantification_id = rna_quantification_id
        request.feature_ids.extend(feature_ids)
        request.threshold = threshold
        request.page_size = pb.int(self._page_size)
        return self._run_search_request(
            request, "expressionlevels",
            protocol.SearchExpressionLevelsResponse)


class HttpClient(AbstractClient):
    """
    The GA4GH HTTP client used by the compliance suite. This class provides
    methods corresponding to the GA4GH search and object GET methods.

    :param url_mapping: The :class:`ga4gh.cts.ctsconfig.UrlMapping` for the
        server under test, or its base URL including the 'http' or 'https'
        prefix.
    :param int logLevel: The amount of debugging information to log using
        the :mod:`logging` module. This is :data:`logging.WARNING` by default.
    :param str authentication_key: The authentication key provided by the
        server after logging in.
    :param bool verify: Whether to verify the server's TLS certificate.
    :param bool ignore_unknown_fields: Whether response fields the suite
        does not model are ignored rather than rejected.
    """

    def __init__(
            self, url_mapping, logLevel=logging.WARNING,
            authentication_key=None, verify=True,
            ignore_unknown_fields=True):
        super(HttpClient, self).__init__(logLevel, ignore_unknown_fields)
        if not isinstance(url_mapping, ctsconfig.UrlMapping):
            url_mapping = ctsconfig.UrlMapping(url_mapping)
        self._url_mapping = url_mapping
        self._authentication_key = authentication_key
        self._verify = verify
        self._session = requests.Session()
        self._setup_http_session()
        requests_log = logging.getLogger("urllib3")
        requests_log.setLevel(logLevel)
        requests_log.propagate = True

    @classmethod
    def fromConfig(cls, config, logLevel=logging.WARNING):
        """
        Returns an HttpClient for the server described by the specified
        suite configuration.
        """
        client = cls(
            ctsconfig.UrlMapping.fromConfig(config), logLevel,
            authentication_key=config.get("AUTHENTICATION_KEY"),
            verify=config.get("VERIFY_SSL", True),
            ignore_unknown_fields=config.get("IGNORE_UNKNOWN_FIELDS", True))
        client.set_page_size(config.get("PAGE_SIZE"))
        return client

    def get_url_mapping(self):
        return self._url_mapping

    def _setup_http_session(self):
        """
        Sets up the common HTTP session parameters used by requests.
        """
        headers = {"Content-type": "application/json"}
        self._session.headers.update(headers)
        self._session.verify = self._verify

    def _check_response_status(self, response):
        """
        Checks the specified HTTP response from the requests package and
        raises an exception if a non-200 HTTP code was returned by the
        server.
        """
        if response.status_code != requests.codes.ok:
            self._logger.error("%s %s", response.status_code, response.text)
            raise exceptions.GAWrapperException(
                response.url, response.status_code, response.text)

    def _get_http_parameters(self):
        """
        Returns the basic HTTP parameters we need all requests.
        """
        return {'key': self._authentication_key}

    def _run_search_page_request(
            self, protocol_request, object_name, protocol_response_class):
        url = self._url_mapping.getSearchUrl(object_name)
        data = protocol.toJson(protocol_request)
        self._logger.debug("request:{}".format(data))
        response = self._session.post(
            url, params=self._get_http_parameters(), data=data)
        self._check_response_status(response)
        return self._deserialize_response(
            response.text, protocol_response_class)

    def _run_get_request(self, object_name, protocol_response_class, id_):
        url = self._url_mapping.getGetUrl(object_name, id_)
        self._logger.debug("get:{}".format(url))
        response = self._session.get(url, params=self._get_http_parameters())
        self._check_response_status(response)
        return self._deserialize_response(
            response.text, protocol_response_class)
