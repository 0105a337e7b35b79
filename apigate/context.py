from dataclasses import dataclass, field


@dataclass
class CompilationPass:
    """State shared by the builders of a single compilation pass.

    A new instance is created for every call to the compiler, so concurrent passes
    (e.g. several services compiled by the same process) never share counters.

    Attributes:
        endpoint_counter: Number of endpoint outputs recorded so far.
        method_dependency: Logical id of the first compiled method. The deployment
            resource depends on it, so the API is not deployed before it has a method.
        compiled_methods: Logical ids of all compiled methods, in compilation order.
    """

    endpoint_counter: int = 0
    method_dependency: str | None = None
    compiled_methods: list[str] = field(default_factory=list)

    def next_endpoint_index(self) -> int:
        """Advance the shared endpoint counter. The first call returns 1."""
        self.endpoint_counter += 1
        return self.endpoint_counter

    def record_method(self, logical_id: str) -> None:
        """Remember a compiled method. Only the first one becomes the dependency anchor."""
        self.compiled_methods.append(logical_id)
        if self.method_dependency is None:
            self.method_dependency = logical_id
