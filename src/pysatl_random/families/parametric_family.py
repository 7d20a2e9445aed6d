"""
Parametric family definitions and management infrastructure.

This module contains the main class for defining parametric families of
distributions: parameterizations, analytical characteristics, the sampling
kernel and the public sampling surface (single draws, vectors, buffers and
matrices).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from functools import partial
from typing import TYPE_CHECKING, dataclass_transform

from pysatl_random.distributions.broadcast import fill as _fill
from pysatl_random.distributions.broadcast import sample_vector as _sample_vector
from pysatl_random.distributions.computation import AnalyticalComputation
from pysatl_random.distributions.engine import resolve_engine
from pysatl_random.distributions.kernels import inverse_cdf_kernel
from pysatl_random.distributions.materialize import materialize
from pysatl_random.distributions.strategies import (
    DefaultComputationStrategy,
    KernelSamplingStrategy,
)
from pysatl_random.families.distribution import ParametricFamilyDistribution
from pysatl_random.types import CharacteristicName, DistributionType

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_random.distributions.engine import EngineLike
    from pysatl_random.distributions.kernels import SamplingKernel
    from pysatl_random.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_random.families.parametrizations import (
        Parametrization,
    )
    from pysatl_random.types import (
        FloatArray,
        GenericCharacteristicName,
        ParameterValue,
        ParametrizationName,
    )

    type ParametrizedFunction = Callable[[Parametrization, Any], Any]


class ParametricFamily:
    """
    A family of distributions with multiple parametrizations.

    Represents a parametric family of distributions (e.g., beta, binomial)
    that can be parameterized in different ways. Manages parametrizations,
    distribution characteristics and the sampling kernel, and provides factory
    methods for distribution instances and the sampling entry points.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    distr_type : DistributionType or Callable[[Parametrization], DistributionType]
        Distribution type or function that infers type from base parametrization.
    distr_parametrizations : list[ParametrizationName]
        List of parametrization names (first is base parametrization).
    distr_characteristics : dict[str, dict[str, Callable] or Callable]
        Mapping from characteristic names to computation functions.
        Single functions are treated as defined for the base parametrization.
    sampling_strategy : SamplingStrategy, optional
        Strategy for sampling from distribution instances.
    computation_strategy : ComputationStrategy, optional
        Strategy for computing distribution characteristics.
    sampling_kernel : SamplingKernel, optional
        Single-draw kernel. Defaults to inversion of the base ``ppf``.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType | Callable[[Parametrization], DistributionType],
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: dict[
            GenericCharacteristicName,
            dict[ParametrizationName, ParametrizedFunction] | ParametrizedFunction,
        ],
        sampling_strategy: SamplingStrategy | None = None,
        computation_strategy: ComputationStrategy[Any, Any] | None = None,
        sampling_kernel: SamplingKernel | None = None,
    ):
        self._name = name
        self._distr_type: Callable[[Parametrization], DistributionType] = (
            (lambda params: distr_type) if isinstance(distr_type, DistributionType) else distr_type
        )

        self.computation_strategy = (
            DefaultComputationStrategy() if computation_strategy is None else computation_strategy
        )
        self.sampling_strategy = (
            KernelSamplingStrategy() if sampling_strategy is None else sampling_strategy
        )
        self._kernel = sampling_kernel

        # Ordered names; the first one is the base parametrization name
        self.parametrization_names: list[ParametrizationName] = distr_parametrizations
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]

        # Runtime registry of parametrization classes
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        def _process_char_val(
            value: dict[ParametrizationName, ParametrizedFunction] | ParametrizedFunction,
        ) -> dict[ParametrizationName, ParametrizedFunction]:
            return value if isinstance(value, dict) else {self.parametrization_names[0]: value}

        self.distr_characteristics: dict[
            GenericCharacteristicName, dict[ParametrizationName, ParametrizedFunction]
        ] = {key: _process_char_val(val) for key, val in distr_characteristics.items()}

        # Precompute analytical plan
        self._analytical_plan: dict[
            ParametrizationName, dict[GenericCharacteristicName, ParametrizationName]
        ] = {}
        base_name = self.base_parametrization_name
        for pname in self.parametrization_names:
            plan_for_p: dict[GenericCharacteristicName, ParametrizationName] = {}
            for characteristic, forms in self.distr_characteristics.items():
                if pname in forms:
                    plan_for_p[characteristic] = pname
                elif base_name in forms:
                    plan_for_p[characteristic] = base_name
            self._analytical_plan[pname] = plan_for_p

    @property
    def name(self) -> str:
        """Get the family name."""
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Get mapping from parametrization names to classes."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Get the base parametrization class.

        Raises
        ------
        ValueError
            If base parametrization is not registered.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    @property
    def kernel(self) -> SamplingKernel:
        """
        Get the sampling kernel.

        Families without an explicit kernel sample by inversion of the base
        ``ppf`` characteristic.

        Raises
        ------
        RuntimeError
            If the family has neither a kernel nor a base ``ppf``.
        """
        if self._kernel is None:
            forms = self.distr_characteristics.get(CharacteristicName.PPF, {})
            quantile = forms.get(self.base_parametrization_name)
            if quantile is None:
                raise RuntimeError(
                    f"Family '{self.name}' has no sampling kernel and no base 'ppf' to invert."
                )
            self._kernel = inverse_cdf_kernel(quantile)
        return self._kernel

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Register a parametrization class.

        Raises
        ------
        ValueError
            If name is already registered.
        """
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName | None = None) -> type[Parametrization]:
        """
        Fetch a parametrization class by name (base when ``None``).

        Raises
        ------
        KeyError
            If name is not registered.
        """
        if name is None:
            return self.base
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """
        Convert parameters to the base parametrization.

        Parameters
        ----------
        parameters : Parametrization
            Parameters in any parametrization.

        Returns
        -------
        Parametrization
            Equivalent parameters in base parametrization.
        """
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def _build_analytical_computations(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Build analytical computations for given parameters.

        Uses precomputed provider plan for efficient computation.
        """
        plan = self._analytical_plan.get(parameters.name, {})
        result: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = {}
        base_params: Parametrization | None = None

        for characteristic, provider_name in plan.items():
            if provider_name == parameters.name:
                params_obj = parameters
            else:
                if base_params is None:
                    base_params = self.to_base(parameters)
                params_obj = base_params

            func_factory = self.distr_characteristics[characteristic][provider_name]
            result[characteristic] = AnalyticalComputation(
                target=characteristic,
                func=partial(func_factory, params_obj),
            )

        return result

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a distribution instance with given parameters.

        Parameters
        ----------
        parametrization_name : str, optional
            Name of parametrization to use (defaults to base).
        **parameters_values
            Parameter values for the distribution.

        Returns
        -------
        ParametricFamilyDistribution
            Distribution instance with specified parameters.

        Raises
        ------
        KeyError
            If parametrization name is not registered.
        ValueError
            If parameters don't satisfy constraints.
        """
        parametrization_class = self.get_parametrization(parametrization_name)
        parameters = parametrization_class(**parameters_values)
        parameters.validate()
        base_parameters = self.to_base(parameters)
        distribution_type = self._distr_type(base_parameters)
        return ParametricFamilyDistribution(self.name, distribution_type, parameters)

    def sample(
        self,
        parametrization_name: str | None = None,
        *,
        engine: EngineLike,
        **parameters_values: Any,
    ) -> Any:
        """
        Draw a single value.

        Parameters
        ----------
        parametrization_name : str, optional
            Name of parametrization the values are given in (defaults to base).
        engine : Engine or int
            Engine to advance, or a non-negative seed for a fresh engine.
        **parameters_values
            Parameter values.

        Returns
        -------
        Any
            The draw, of the promoted floating type. NaN if the parameters
            are outside the domain; the engine is then left untouched.
        """
        parameters = self.get_parametrization(parametrization_name)(**parameters_values)
        return self.kernel(parameters, resolve_engine(engine))

    def sample_vector(
        self,
        num_elem: int,
        parametrization_name: str | None = None,
        *,
        engine: EngineLike = None,
        **parameters_values: ParameterValue,
    ) -> FloatArray:
        """
        Draw ``num_elem`` values into a fresh 1-D array.

        Parameter values may be sequences; they are cycled positionally.
        """
        return _sample_vector(
            self.kernel,
            self.get_parametrization(parametrization_name),
            num_elem,
            resolve_engine(engine),
            **parameters_values,
        )

    def fill(
        self,
        out: FloatArray,
        parametrization_name: str | None = None,
        *,
        engine: EngineLike = None,
        num_elem: int | None = None,
        **parameters_values: ParameterValue,
    ) -> FloatArray:
        """
        Fill a caller-owned 1-D buffer with draws.

        Writes ``num_elem`` elements (default: the whole buffer) and returns
        ``out``.
        """
        return _fill(
            self.kernel,
            self.get_parametrization(parametrization_name),
            out,
            resolve_engine(engine),
            num_elem,
            **parameters_values,
        )

    def sample_matrix(
        self,
        rows: int,
        cols: int,
        parametrization_name: str | None = None,
        *,
        engine: EngineLike = None,
        **parameters_values: ParameterValue,
    ) -> FloatArray:
        """
        Draw a ``rows x cols`` matrix.

        Element ``(i, j)`` is the ``(i * cols + j)``-th scalar draw from the
        engine: a seeded call equals ``rows * cols`` sequential :meth:`sample`
        calls sharing one engine made from the same seed.
        """
        return materialize(
            self.kernel,
            self.get_parametrization(parametrization_name),
            rows,
            cols,
            resolve_engine(engine),
            **parameters_values,
        )

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Create a class decorator that registers a parametrization.

        Parameters
        ----------
        name : str
            Name of the parametrization.

        Returns
        -------
        Callable[[type[Parametrization]], type[Parametrization]]
            Class decorator for registering parametrizations.
        """
        from pysatl_random.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution
