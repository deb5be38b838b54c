"""Built-in program decoders."""

from solana_txparse.programs.registry import (
    ProgramDecoder,
    ProgramDecoderRegistry,
    default_decoder_registry,
    register_builtin_decoders,
)
