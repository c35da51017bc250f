import pytest

from specbind import AbstractMethodError, Factory, FactoryKind


def test_default_factory_is_abstract_and_raises_on_invoke():
    factory = Factory()

    assert factory.kind is FactoryKind.ABSTRACT
    with pytest.raises(AbstractMethodError):
        factory.invoke()


def test_abstract_method_error_is_not_implemented_error():
    assert issubclass(AbstractMethodError, NotImplementedError)


def test_function_factory_passes_arguments_positionally():
    factory = Factory.function(lambda a, b: (a, b))
    assert factory.invoke(1, 2) == (1, 2)


def test_constructor_factory_instantiates_class():
    class Service:
        def __init__(self, db, cache):
            self.db = db
            self.cache = cache

    svc = Factory.constructor(Service).invoke("db", "cache")

    assert isinstance(svc, Service)
    assert (svc.db, svc.cache) == ("db", "cache")


def test_constructor_factory_requires_class():
    with pytest.raises(TypeError):
        Factory.constructor(lambda: None)  # type: ignore[arg-type]


def test_literal_factory_returns_target_and_ignores_arguments():
    value = object()
    assert Factory.literal(value).invoke("ignored") is value


def test_for_descriptor_selects_kind():
    class Service: ...

    def make(): ...

    assert Factory.for_descriptor(Service).kind is FactoryKind.CONSTRUCTOR
    assert Factory.for_descriptor(make).kind is FactoryKind.FUNCTION
    assert Factory.for_descriptor(42) == Factory.literal(42)


def test_mapping_descriptor_is_literal_of_its_payload():
    factory = Factory.for_descriptor({"@singleton": True, "host": "localhost", "port": 5432})

    assert factory.kind is FactoryKind.LITERAL
    assert factory.invoke() == {"host": "localhost", "port": 5432}
