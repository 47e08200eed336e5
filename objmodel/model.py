"""基于委托的对象模型

实例先在自己的字段里查找成员，找不到再沿着类的父链逐级查找，
第一个匹配的结果胜出。每个类最多只有一个父类（单继承）。
"""

import logging
import types

MISSING = object()

LOGGER = logging.getLogger(__name__)


class ObjModelError(Exception):
    """objmodel 所有异常的基类"""
    pass


class MemberNotFound(ObjModelError, AttributeError):
    """实例字段和整条类链上都找不到成员时引发"""

    def __init__(self, name, owner):
        super(MemberNotFound, self).__init__(
            "%r has no member %r" % (owner, name))
        self.name = name
        self.owner = owner


class InvalidConstruction(ObjModelError, TypeError):
    """试图构造抽象类的实例，或者构造参数不被接受时引发"""
    pass


class ClassLogger(logging.LoggerAdapter):
    '''在日志消息前加上类名的日志类'''

    def process(self, msg, kwargs):
        return "[%s] %s" % (self.extra['cls'].name, msg), kwargs


def _is_bindable(meth):
    # 只绑定普通函数，类、内建函数等按原样返回
    return isinstance(meth, types.FunctionType)


def _make_boundmethod(meth, self):
    def bound(*args, **kwargs):
        return meth(self, *args, **kwargs)
    return bound


class Base(object):
    """类和实例共同的基类，持有一个私有的字段字典"""

    def __init__(self, fields):
        self._fields = fields

    def _read_dict(self, fieldname):
        """从字典中读取字段 `fieldname`"""
        return self._fields.get(fieldname, MISSING)

    def _write_dict(self, fieldname, value):
        """将一个字段 `fieldname` 写入到字典中"""
        self._fields[fieldname] = value


class Class(Base):
    """一个用户定义的类（类描述符）

    `_fields` 是方法表，`base_class` 指向唯一的父类，为 None 时是根类。
    抽象类只提供行为给派生类，不能直接构造实例。
    """

    def __init__(self, name, base_class, fields, abstract=False):
        Base.__init__(self, fields)
        self.name = name
        self.base_class = base_class
        self.abstract = abstract
        self.logger = ClassLogger(LOGGER, {'cls': self})

    def __repr__(self):
        return "<class %s>" % (self.name,)

    def method_resolution_order(self):
        """计算类的方法解析顺序：自身、父类、祖父类……"""
        mro = []
        cls = self
        while cls is not None:
            if cls in mro:
                raise ValueError("Cyclic base class chain at %r" % (cls,))
            mro.append(cls)
            cls = cls.base_class
        return mro

    def issubclass(self, cls):
        """是否是 cls 的子类（包括自身）"""
        return cls in self.method_resolution_order()

    def _read_from_class(self, methname):
        for cls in self.method_resolution_order():
            if methname in cls._fields:
                return cls._fields[methname]
        return MISSING

    def lookup(self, methname):
        """沿父链查找 `methname`，找不到时引发 MemberNotFound

        返回的是未绑定的实现，用来显式调用某个祖先类的版本，
        例如派生类的 `_init` 里调用父类的 `_init`。
        """
        result = self._read_from_class(methname)
        if result is MISSING:
            self.logger.debug("no member %r", methname)
            raise MemberNotFound(methname, self)
        return result

    def read_attr(self, fieldname):
        """从类中读取 `fieldname`，与 `lookup` 相同"""
        return self.lookup(fieldname)

    def allocate(self):
        """分配阶段：创建一个字段为空、与本类关联的实例"""
        if self.abstract:
            raise InvalidConstruction(
                "Can't instantiate abstract class %s" % (self.name,))
        return Instance(self)

    def new(self, *args):
        """构造一个实例：先分配，再用链上最近的 `_init` 初始化"""
        instance = self.allocate()
        init = self._read_from_class('_init')
        if init is not MISSING:
            init(instance, *args)
        elif args:
            raise InvalidConstruction("%s takes no arguments" % (self.name,))
        self.logger.debug("constructed instance with %d argument(s)", len(args))
        return instance


class Instance(Base):
    """用户定义类的实例

    字段只属于实例本身，方法永远不会复制到实例的字段字典中。
    类和字段字典保存在改编过的名字下，任何字段名都不会覆盖它们；
    `obj.x = v` 总是写入字段，名为 `cls` 的字段要用 `read_attr` 读取。
    """

    def __init__(self, cls):
        assert isinstance(cls, Class)
        object.__setattr__(self, '_Instance__cls', cls)
        object.__setattr__(self, '_Instance__fields', {})

    @property
    def cls(self):
        return self.__cls

    @property
    def _fields(self):
        return self.__fields

    def __repr__(self):
        return "<%s instance>" % (self.cls.name,)

    def __str__(self):
        return to_display_string(self)

    def __getattr__(self, fieldname):
        # 只在 Python 常规查找失败时调用；双下划线名字和内部状态不拦截
        if (fieldname.startswith('__') or fieldname.startswith('_Instance__')
                or fieldname in ('cls', '_fields')):
            raise AttributeError(fieldname)
        return self.read_attr(fieldname)

    def __setattr__(self, fieldname, value):
        self.write_attr(fieldname, value)

    def read_attr(self, fieldname):
        """读取成员：先查实例字段，再沿类链查找

        类链上找到的函数会绑定到本实例上，所以方法内部对
        `self` 的调用仍然从最派生的类开始查找（虚分派）。
        """
        result = self._read_dict(fieldname)
        if result is not MISSING:
            return result
        result = self.cls._read_from_class(fieldname)
        if _is_bindable(result):
            return _make_boundmethod(result, self)
        if result is not MISSING:
            return result
        self.cls.logger.debug("instance has no member %r", fieldname)
        raise MemberNotFound(fieldname, self)

    def write_attr(self, fieldname, value):
        """将字段 `fieldname` 写入实例"""
        self._write_dict(fieldname, value)

    def isinstance(self, cls):
        """如果对象是类的实例则返回True"""
        return self.cls.issubclass(cls)

    def callmethod(self, methname, *args, **kwargs):
        """在对象上使用参数 `args` 调用方法 `methname`"""
        meth = self.cls.lookup(methname)
        return meth(self, *args, **kwargs)


def define_class(name, base_class=None, methods=None, abstract=False):
    """创建一个新类，查找失败时转到 `base_class`"""
    if base_class is not None and not isinstance(base_class, Class):
        raise TypeError("base_class must be a Class, not %r" % (base_class,))
    cls = Class(name=name, base_class=base_class, fields=dict(methods or {}),
                abstract=abstract)
    cls.logger.debug("defined with base %r", base_class)
    return cls


def allocate(cls):
    return cls.allocate()


def get_member(obj, name):
    return obj.read_attr(name)


def to_display_string(obj):
    """用链上最近的 `__str__` 生成显示字符串，没有时使用默认格式"""
    meth = obj.cls._read_from_class('__str__')
    if meth is MISSING:
        return repr(obj)
    return meth(obj)
