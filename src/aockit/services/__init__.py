"""Service layer: every operation returns a ServiceResult.

Services read input through :mod:`aockit.infrastructure` and delegate
all container logic to :mod:`aockit.domain`.
"""
