"""Encoding/decoding between KPS 9566 and Unicode."""

from kps9566.codec.decoder import Kps9566Decoder
from kps9566.codec.encoder import Kps9566Encoder, Resolution
from kps9566.codec.codec import Kps9566Codec, default_codec
from kps9566.codec.result import TranscodeResult

__all__ = ["Kps9566Decoder", "Kps9566Encoder", "Kps9566Codec", "default_codec", "Resolution", "TranscodeResult"]
