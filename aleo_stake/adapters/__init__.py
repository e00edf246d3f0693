"""
Aleo explorer adapters

- amounts: stake encodings -> microcredits
- committee: committee / bonded response normalization
- reporting: TVL accumulator sinks
- staking: committee stake computation
"""
