"""Typed decoders for Vote program instructions."""

from solana_txparse.constants import VOTE_PROGRAM_ID
from solana_txparse.instruction.typed import typed_instruction_decoder
from solana_txparse.programs.vote.instructions import (
    Authorize,
    InitializeAccount,
    UpdateCommission,
    UpdateValidatorIdentity,
    Vote,
    VoteInstruction,
    Withdraw,
)


def _decoder(variant_class):
    return typed_instruction_decoder(VOTE_PROGRAM_ID, VoteInstruction, variant_class)


decode_initialize_account = _decoder(InitializeAccount)
decode_authorize = _decoder(Authorize)
decode_vote = _decoder(Vote)
decode_withdraw = _decoder(Withdraw)
decode_update_validator_identity = _decoder(UpdateValidatorIdentity)
decode_update_commission = _decoder(UpdateCommission)
