import numpy as np
import pytest

from carsim.directions import DirectionContext
from carsim.logic import SimulationLogic

from doubles import SpyContext, spy_resolver


@pytest.fixture
def spy_logic():
    resolve, strategies = spy_resolver()
    context = SpyContext()
    logic = SimulationLogic(context, resolve, rng=np.random.default_rng(0))
    return logic, context, strategies


@pytest.fixture
def logic():
    return SimulationLogic(DirectionContext(), rng=np.random.default_rng(1234))
