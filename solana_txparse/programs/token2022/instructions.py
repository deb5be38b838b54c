"""Token-2022 program instructions.

Token-2022 keeps the SPL Token instruction set and encoding for type ids
0 to 20; the payload classes are shared with ``programs.token``.
Extension instructions are not decoded.
"""

from solana_txparse.constants import TOKEN_2022_PROGRAM_ID
from solana_txparse.programs.token.instructions import TOKEN_VARIANTS, TokenInstruction


class Token2022Instruction(TokenInstruction):
    PROGRAM_ID = TOKEN_2022_PROGRAM_ID
    PROGRAM_NAME = "Token2022"
    VARIANTS = TOKEN_VARIANTS
