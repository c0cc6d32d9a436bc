"""
Remote document loader using Requests.

.. module:: ttl2jsonld.documentloader.requests
  :synopsis: Remote context and frame loader using Requests
"""
import logging
import re
import string
import urllib.parse as urllib_parse

from pyld.jsonld import LINK_HEADER_REL, parse_link_header, prepend_base

from ttl2jsonld.convert import ConversionError

log = logging.getLogger(__name__)

DEFAULT_HEADERS = {'Accept': 'application/ld+json, application/json'}


def validate_url(url, secure=False):
    """
    Raises a ConversionError unless the URL is an http(s) URL (https only
    in secure mode).
    """
    pieces = urllib_parse.urlparse(url)
    if (not all([pieces.scheme, pieces.netloc]) or
            pieces.scheme not in ['http', 'https'] or
            set(pieces.netloc) > set(
                string.ascii_letters + string.digits + '-.:')):
        raise ConversionError(
            'URL could not be dereferenced; only "http" and "https" '
            'URLs are supported.',
            'ttl2jsonld.InvalidUrl', {'url': url})
    if secure and pieces.scheme != 'https':
        raise ConversionError(
            'URL could not be dereferenced; secure mode enabled and '
            'the URL\'s scheme is not "https".',
            'ttl2jsonld.InvalidUrl', {'url': url})


def apply_link_header(url, doc, link_header):
    """
    Applies a response's Link header to a RemoteDocument.

    A JSON-LD context link sets doc['contextUrl']. When the response is
    not JSON and an alternate link points to a JSON-LD document, the
    absolute URL of that document is returned so the caller can follow it.

    :param url: the requested URL, used as base for relative targets.
    :param doc: the RemoteDocument being built.
    :param link_header: the raw Link header, may be None.

    :return: the alternate document URL or None.
    """
    if not link_header:
        return None
    links = parse_link_header(link_header)
    content_type = doc['contentType']
    linked_context = links.get(LINK_HEADER_REL)
    # only 1 related link header permitted
    if linked_context and content_type != 'application/ld+json':
        if isinstance(linked_context, list):
            raise ConversionError(
                'URL could not be dereferenced, it has more '
                'than one associated HTTP Link Header.',
                'ttl2jsonld.LoadDocumentError', {'url': url})
        doc['contextUrl'] = linked_context['target']
    linked_alternate = links.get('alternate')
    if (linked_alternate and
            not isinstance(linked_alternate, list) and
            linked_alternate.get('type') == 'application/ld+json' and
            not re.match(r'^application\/(\w*\+)?json$', content_type)):
        return prepend_base(url, linked_alternate['target'])
    return None


def requests_document_loader(secure=False, max_link_follows=2, **kwargs):
    """
    Create a Requests document loader.

    :param secure: require all requests to use HTTPS (default: False).
    :param max_link_follows: maximum number of alternate link follows.
    :param **kwargs: extra keyword args for Requests get() call, such as
      timeout, verify or cert.

    :return: the RemoteDocument loader function.
    """
    import requests

    def loader(url, options=None, link_follow_count=0):
        """
        Retrieves a JSON document at the given URL.

        :param url: the URL to retrieve.
        :param [options]: 'headers' overrides the request headers.

        :return: the RemoteDocument.
        """
        options = options or {}
        try:
            validate_url(url, secure)
            headers = options.get('headers') or DEFAULT_HEADERS
            log.debug('GET %s', url)
            response = requests.get(url, headers=headers, **kwargs)
            response.raise_for_status()

            content_type = response.headers.get('content-type')
            if not content_type:
                content_type = 'application/octet-stream'
            doc = {
                'contentType': content_type,
                'contextUrl': None,
                'documentUrl': response.url,
                'document': None
            }
            try:
                doc['document'] = response.json()
            except ValueError:
                # not JSON, a link header may still point to it
                doc['document'] = response.text
            alternate = apply_link_header(
                url, doc, response.headers.get('link'))
            if alternate:
                if link_follow_count >= max_link_follows:
                    raise ConversionError(
                        'Exceeded maximum link header redirects (%d).' %
                        max_link_follows,
                        'ttl2jsonld.LoadDocumentError', {'url': url})
                return loader(alternate, options, link_follow_count + 1)
            return doc
        except ConversionError:
            raise
        except Exception as cause:
            raise ConversionError(
                'Could not retrieve a JSON document from the URL.',
                'ttl2jsonld.LoadDocumentError', {'url': url}, cause=cause)

    return loader
