"""Tests for decoding and encoding of name records."""

import io

import pytest

from shortnames.errors import EncodingError
from shortnames.utils.text_io import decode_name, encode_name, iter_decoded_lines


def test_decode_name():
	assert decode_name('Plac Wolności'.encode('utf-8')) == 'Plac Wolności'
	assert decode_name('Plac Wolności'.encode('iso-8859-2'), 'iso-8859-2') == 'Plac Wolności'


def test_decode_invalid_bytes():
	with pytest.raises(EncodingError):
		decode_name(b'Plac Wolno\xc5ci')


def test_decode_unknown_encoding():
	with pytest.raises(EncodingError):
		decode_name(b'abc', 'no-such-codec')


def test_encode_name():
	assert encode_name('ул. Ленина') == 'ул. Ленина'.encode('utf-8')
	with pytest.raises(EncodingError):
		encode_name('ул. Ленина', 'ascii')


def test_iter_decoded_lines():
	stream = io.BytesIO('Main Street\r\nulica Jana\n\nLast'.encode('utf-8'))

	assert list(iter_decoded_lines(stream)) == ['Main Street', 'ulica Jana', '', 'Last']
