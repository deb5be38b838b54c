"""Vote program: instructions and typed decoders."""

from solana_txparse.programs.vote.decoders import (
    decode_authorize,
    decode_initialize_account,
    decode_update_commission,
    decode_update_validator_identity,
    decode_vote,
    decode_withdraw,
)
from solana_txparse.programs.vote.instructions import (
    VOTE_VARIANTS,
    Authorize,
    InitializeAccount,
    UpdateCommission,
    UpdateValidatorIdentity,
    Vote,
    VoteAuthorize,
    VoteInstruction,
    Withdraw,
)
