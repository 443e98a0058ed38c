"""Doubling, failing and recovering: the smallest useful chains."""

from trychain import start

doubled = (
    start(lambda: (42, None))
    .then(lambda val: (val * 2, None))
    .catch(lambda err: -1)
)
print(doubled)  # 84

recovered = (
    start(lambda: (0, RuntimeError("something went wrong")))
    .then(lambda val: (val * 2, None))  # skipped
    .finally_(lambda: print("cleanup runs either way"))
    .catch(lambda err: -1)
)
print(recovered)  # -1
