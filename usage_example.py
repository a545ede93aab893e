# usage_example.py
# Minimal usage example for mkv_chain.
# This file is not part of the mkv_chain package. For reference only.

from mkv_chain import MarkovChain, SquareMatrix, Vector

# Inputs (row-major literal; each row sums to 1)
t_mat = SquareMatrix([
    [0.9, 0.0, 0.1],
    [0.1, 0.3, 0.6],
    [0.0, 0.1, 0.9],
])
initial = Vector([0.1, 0.3, 0.6])

# Compute
chain = MarkovChain(t_mat, initial)
state = chain.take_to(3)

# Inspect
# step 1: [0.12, 0.15, 0.73]
# step 2: [0.123, 0.118, 0.759]
# step 3: [0.1225, 0.1113, 0.7662]

print(state)
print("absorbing:", chain.has_absorbing_state())

# Expected output:
# Vector([0.12250000000000001, 0.11130000000000001, 0.7662])
# absorbing: False

# Absorbing example: column 0 holds a single 1.0 plus an incoming 0.1.
# MarkovChain(SquareMatrix([[1.0, 0.0], [0.1, 0.9]]), Vector([0.0, 1.0])).has_absorbing_state()
# -> True

# IndexOutOfBoundsError examples:
# initial[3]           # valid: 0..2
# t_mat[(0, -1)]       # negative indices are never wrapped
