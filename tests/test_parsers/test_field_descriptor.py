from dataclasses import MISSING, replace

import structargs
from structargs.parser import FieldDescriptor, FieldKind


def test_package_exports():
    assert structargs.FieldKind is FieldKind
    assert callable(structargs.parse)


def test_descriptor_without_default():
    descriptor = FieldDescriptor(name="name", kind=FieldKind.SCALAR)
    assert descriptor.default is MISSING
    assert descriptor.default_factory is MISSING
    assert not descriptor.has_default
    assert descriptor.get_default() is None
    assert descriptor.type is str
    assert descriptor.elements == ()


def test_descriptor_with_default():
    descriptor = FieldDescriptor(name="count", kind=FieldKind.SCALAR, type=int, default=3)
    assert descriptor.has_default
    assert descriptor.get_default() == 3


def test_descriptor_with_default_factory():
    descriptor = replace(
        FieldDescriptor(name="files", kind=FieldKind.SEQUENCE, container=list),
        default_factory=list,
    )
    assert descriptor.has_default
    assert descriptor.get_default() == []
    assert descriptor.get_default() is not descriptor.get_default()
