"""对象模型的两个示例

* 数据库对象：抽象基类 AbstractDatabaseObject 和派生类 Table
* 蔬菜字典：为每个字段自动生成 getter
"""

from objmodel.accessors import AutoGetters
from objmodel.model import define_class

DEFAULT_COLUMNS = {'C1': 'VARCHAR(10)', 'C2': 'BOOLEAN'}

VEGETABLES = {'carrot': 'orange', 'cucumber': 'green', 'potato': 'yellow'}


def _database_object_init(self, name):
    """`name` 是标识数据库对象的名字"""
    self._name = name


def _get_name(self):
    return self._name


# 抽象类：没有分配入口，只能派生
ABSTRACT_DATABASE_OBJECT = define_class(
    'AbstractDatabaseObject',
    methods={
        '_init': _database_object_init,
        'get_name': _get_name,
    },
    abstract=True,
)


def _table_init(self, name, columns):
    """`columns` 是以列名为键、类型为值的字典"""
    if not columns:
        raise ValueError("A table needs at least one column.")
    ABSTRACT_DATABASE_OBJECT.lookup('_init')(self, name)
    self._columns = columns


def _table_str(self):
    # 按列名排序，输出与字典的迭代顺序无关
    columns = ", ".join(
        "%s (%s)" % (column, self._columns[column])
        for column in sorted(self._columns)
    )
    return "%s (%s)" % (self.get_name(), columns)


TABLE = define_class(
    'Table',
    base_class=ABSTRACT_DATABASE_OBJECT,
    methods={
        '_init': _table_init,
        '__str__': _table_str,
    },
)


def new_table(name, columns):
    """创建一个数据库表实例"""
    return TABLE.new(name, columns)


def vegetables(fields=None):
    """返回一个带自动 getter 的蔬菜字典，默认使用 VEGETABLES 的副本"""
    return AutoGetters(dict(VEGETABLES if fields is None else fields))
