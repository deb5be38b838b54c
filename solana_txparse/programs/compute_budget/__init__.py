"""Compute Budget program: instructions and typed decoders."""

from solana_txparse.programs.compute_budget.decoders import (
    decode_request_heap_frame,
    decode_request_units_deprecated,
    decode_set_compute_unit_limit,
    decode_set_compute_unit_price,
    decode_set_loaded_accounts_data_size_limit,
)
from solana_txparse.programs.compute_budget.instructions import (
    COMPUTE_BUDGET_VARIANTS,
    ComputeBudgetInstruction,
    RequestHeapFrame,
    RequestUnitsDeprecated,
    SetComputeUnitLimit,
    SetComputeUnitPrice,
    SetLoadedAccountsDataSizeLimit,
)
