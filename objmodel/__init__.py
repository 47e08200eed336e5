from objmodel.accessors import AutoGetters, NoSuchField, make_accessors, resolve
from objmodel.model import (
    Class, Instance, InvalidConstruction, MemberNotFound, ObjModelError,
    allocate, define_class, get_member, to_display_string,
)

# 指定能被其它模块引用的函数、类等
__all__ = [
    'AutoGetters', 'Class', 'Instance', 'InvalidConstruction',
    'MemberNotFound', 'NoSuchField', 'ObjModelError', 'allocate',
    'define_class', 'get_member', 'make_accessors', 'resolve',
    'to_display_string',
]
