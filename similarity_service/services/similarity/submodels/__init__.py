"""Sub-model registry: one code table per axis of a composite similarity."""

from collections.abc import Mapping

from similarity_service.services.similarity.base import SubModel, SubModelFactory
from similarity_service.services.similarity.errors import UnknownSubModelError
from similarity_service.services.similarity.params import ParameterBag
from similarity_service.services.similarity.submodels.dfr import AFTER_EFFECTS, BASIC_MODELS
from similarity_service.services.similarity.submodels.ib import DISTRIBUTIONS, LAMBDAS
from similarity_service.services.similarity.submodels.normalization import NORMALIZATIONS

BASIC_MODEL = "basic_model"
AFTER_EFFECT = "after_effect"
NORMALIZATION = "normalization"
DISTRIBUTION = "distribution"
LAMBDA = "lambda"


class SubModelRegistry:
    """
    Maps (axis, code) to a sub-model factory. Codes match exactly, case-sensitively.

    A sub-model reads its own parameters from the `<axis>.<code>.*` section of the parent's bag,
    so two similarities picking different codes on one axis never share parameter names.
    """

    def __init__(self, axes: Mapping[str, Mapping[str, SubModelFactory]] | None = None) -> None:
        self._axes: dict[str, dict[str, SubModelFactory]] = {
            axis: dict(codes) for axis, codes in (axes or {}).items()
        }

    def register(self, axis: str, code: str, factory: SubModelFactory) -> None:
        self._axes.setdefault(axis, {})[code] = factory

    def codes(self, axis: str) -> list[str]:
        return list(self._axes.get(axis, {}))

    def resolve(self, axis: str, code: str, bag: ParameterBag) -> SubModel:
        """
        Build the sub-model registered for (axis, code), configured from bag's `<axis>.<code>` section.
        Raises UnknownSubModelError if nothing is registered for the pair.
        """
        factory = self._axes.get(axis, {}).get(code)
        if factory is None:
            raise UnknownSubModelError(axis, code, scope=bag.scope)
        return factory(bag.section(f"{axis}.{code}"))

    def resolve_selected(self, axis: str, bag: ParameterBag) -> SubModel:
        """Resolve the code selected by bag[axis]; a missing selection raises MissingParameterError."""
        code = bag.require(axis, str)
        return self.resolve(axis, code, bag)


SUB_MODELS = SubModelRegistry(
    {
        BASIC_MODEL: BASIC_MODELS,
        AFTER_EFFECT: AFTER_EFFECTS,
        NORMALIZATION: NORMALIZATIONS,
        DISTRIBUTION: DISTRIBUTIONS,
        LAMBDA: LAMBDAS,
    }
)
