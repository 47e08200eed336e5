"""访问器合成

按 `get_<字段名>` 的命名约定，在属性查找失败时动态生成一个无参数
的取值函数，而不是事先为每个字段声明访问器。
"""

import logging

from objmodel.model import ObjModelError

ACCESSOR_PREFIX = 'get_'

LOGGER = logging.getLogger(__name__)


class NoSuchField(ObjModelError, AttributeError):
    """请求的字段不存在，或者名字不符合访问器命名约定"""

    def __init__(self, field, message=None):
        super(NoSuchField, self).__init__(
            message or "No such field: %r" % (field,))
        self.field = field


def field_name(requested_name):
    """去掉开头的 `get_` 前缀，得到目标字段名"""
    if (not requested_name.startswith(ACCESSOR_PREFIX)
            or len(requested_name) == len(ACCESSOR_PREFIX)):
        raise NoSuchField(
            requested_name,
            "%r is not an accessor name (expected %r prefix)" % (
                requested_name, ACCESSOR_PREFIX))
    return requested_name[len(ACCESSOR_PREFIX):]


def resolve(container, requested_name):
    """为 `requested_name` 合成一个读取 `container` 中对应字段的函数

    返回的函数在每次调用时才读取字段，能看到之后对字段的修改。
    字段在合成时必须存在；如果之后被删除，调用时引发 NoSuchField。
    """
    field = field_name(requested_name)
    if field not in container:
        LOGGER.debug("no field %r for %r", field, requested_name)
        raise NoSuchField(field)

    def accessor():
        try:
            return container[field]
        except KeyError:
            raise NoSuchField(field) from None

    accessor.__name__ = requested_name
    LOGGER.debug("synthesized %s", requested_name)
    return accessor


def make_accessors(container, fields=None):
    """一次性为已知字段生成全部访问器，返回 {访问器名: 函数}"""
    if fields is None:
        fields = list(container)
    return {
        ACCESSOR_PREFIX + field: resolve(container, ACCESSOR_PREFIX + field)
        for field in fields
    }


class AutoGetters(object):
    """给一个字典配上自动生成的 getter

    `fields` 不会被复制，通过任何一方做的修改都是可见的::

        vegetables = AutoGetters({'carrot': 'orange'})
        vegetables.get_carrot()     # 'orange'
    """

    def __init__(self, fields):
        self._fields = fields

    def __getattr__(self, name):
        if name.startswith('__') or name == '_fields':
            raise AttributeError(name)
        return resolve(self._fields, name)

    def __repr__(self):
        return "AutoGetters(%r)" % (self._fields,)

    def __getitem__(self, key):
        return self._fields[key]

    def __setitem__(self, key, value):
        self._fields[key] = value

    def __delitem__(self, key):
        del self._fields[key]

    def __contains__(self, key):
        return key in self._fields

    def __iter__(self):
        return iter(self._fields)

    def __len__(self):
        return len(self._fields)
