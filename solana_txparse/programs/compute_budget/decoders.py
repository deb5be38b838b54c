"""Typed decoders for Compute Budget program instructions."""

from solana_txparse.constants import COMPUTE_BUDGET_PROGRAM_ID
from solana_txparse.instruction.typed import typed_instruction_decoder
from solana_txparse.programs.compute_budget.instructions import (
    ComputeBudgetInstruction,
    RequestHeapFrame,
    RequestUnitsDeprecated,
    SetComputeUnitLimit,
    SetComputeUnitPrice,
    SetLoadedAccountsDataSizeLimit,
)


def _decoder(variant_class):
    return typed_instruction_decoder(COMPUTE_BUDGET_PROGRAM_ID, ComputeBudgetInstruction, variant_class)


decode_request_units_deprecated = _decoder(RequestUnitsDeprecated)
decode_request_heap_frame = _decoder(RequestHeapFrame)
decode_set_compute_unit_limit = _decoder(SetComputeUnitLimit)
decode_set_compute_unit_price = _decoder(SetComputeUnitPrice)
decode_set_loaded_accounts_data_size_limit = _decoder(SetLoadedAccountsDataSizeLimit)
