"""
Remote document loader using aiohttp.

.. module:: ttl2jsonld.documentloader.aiohttp
  :synopsis: Remote context and frame loader using aiohttp
"""
import asyncio
import logging

from ttl2jsonld.convert import ConversionError
from ttl2jsonld.documentloader.requests import (
    DEFAULT_HEADERS, apply_link_header, validate_url)

log = logging.getLogger(__name__)


def aiohttp_document_loader(secure=False, max_link_follows=2, **kwargs):
    """
    Create a document loader using aiohttp. Requests run to completion on
    a fresh event loop, so the loader must not be called from inside a
    running one.

    :param secure: require all requests to use HTTPS (default: False).
    :param max_link_follows: maximum number of alternate link follows.
    :param **kwargs: extra keyword args for the aiohttp get() call.

    :return: the RemoteDocument loader function.
    """
    import aiohttp

    if isinstance(kwargs.get('timeout'), (int, float)):
        kwargs['timeout'] = aiohttp.ClientTimeout(total=kwargs['timeout'])

    async def async_loader(url, headers, link_follow_count=0):
        validate_url(url, secure)
        log.debug('GET %s', url)
        async with aiohttp.ClientSession() as session:
            async with session.get(url, headers=headers,
                                   **kwargs) as response:
                response.raise_for_status()
                content_type = response.headers.get('content-type')
                if not content_type:
                    content_type = 'application/octet-stream'
                text = await response.text()
                doc = {
                    'contentType': content_type,
                    'contextUrl': None,
                    'documentUrl': str(response.url),
                    'document': text
                }
                try:
                    doc['document'] = await response.json(content_type=None)
                except ValueError:
                    pass
                alternate = apply_link_header(
                    url, doc, response.headers.get('link'))
        if alternate:
            if link_follow_count >= max_link_follows:
                raise ConversionError(
                    'Exceeded maximum link header redirects (%d).' %
                    max_link_follows,
                    'ttl2jsonld.LoadDocumentError', {'url': url})
            return await async_loader(
                alternate, headers, link_follow_count + 1)
        return doc

    def loader(url, options=None):
        """
        Retrieves a JSON document at the given URL.

        :param url: the URL to retrieve.
        :param [options]: 'headers' overrides the request headers.

        :return: the RemoteDocument.
        """
        options = options or {}
        headers = options.get('headers') or DEFAULT_HEADERS
        try:
            return asyncio.run(async_loader(url, headers))
        except ConversionError:
            raise
        except Exception as cause:
            raise ConversionError(
                'Could not retrieve a JSON document from the URL.',
                'ttl2jsonld.LoadDocumentError', {'url': url}, cause=cause)

    return loader
