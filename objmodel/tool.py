"""对象模型演示 -- 主驱动程序

    python -m objmodel.tool inheritance --name T --column C1=VARCHAR(10)
    python -m objmodel.tool auto-getters --get carrot
"""

import argparse
import logging
import sys

from objmodel.accessors import ACCESSOR_PREFIX, NoSuchField
from objmodel.examples import DEFAULT_COLUMNS, new_table, vegetables

BAD_ARGS = 1
BAD_FIELD = 2

# 命令参数

ARGS = argparse.ArgumentParser(description="Object model demos")
ARGS.add_argument(
    'demo', choices=('inheritance', 'auto-getters'),
    help='Which example to run'
)
# 表名
ARGS.add_argument(
    '--name', default='T',
    help='Table name for the inheritance demo (default T)'
)
# 列定义，可重复
ARGS.add_argument(
    '--column', action='append', dest='columns', metavar='NAME=TYPE',
    help='Table column (may be repeated)'
)
# 要读取的字段
ARGS.add_argument(
    '--get', default='carrot', metavar='FIELD',
    help='Field read through a synthesized getter (default carrot)'
)
# 替换默认的蔬菜字典，可重复
ARGS.add_argument(
    '--field', action='append', dest='fields', metavar='NAME=VALUE',
    help='Backing field for the auto-getters demo (may be repeated)'
)
# 根据v的个数确定日志级别，比如 -vv 就是DEBUG
ARGS.add_argument(
    '-v', '--verbose', action='count', dest='level',
    default=1, help='Verbose logging (repeat for more verbose)'
)
# 仅记录错误日志
ARGS.add_argument(
    '-q', '--quiet', action='store_const', const=0, dest='level',
    help='Only log errors'
)
ARGS.add_argument(
    '--log-file', default=None, help='log file (default stderr)'
)


def parse_pairs(pairs):
    """把 NAME=VALUE 形式的参数解析成字典"""
    result = {}
    for pair in pairs:
        name, sep, value = pair.partition('=')
        if not sep or not name:
            raise ValueError("Expected NAME=VALUE, got %r" % (pair,))
        result[name] = value
    return result


def run_inheritance(args, out):
    columns = parse_pairs(args.columns) if args.columns else dict(DEFAULT_COLUMNS)
    print(new_table(args.name, columns), file=out)


def run_auto_getters(args, out):
    fields = parse_pairs(args.fields) if args.fields else None
    getter = getattr(vegetables(fields), ACCESSOR_PREFIX + args.get)
    print(getter(), file=out)


DEMOS = {
    'inheritance': run_inheritance,
    'auto-getters': run_auto_getters,
}


def main(argv=None):
    """主函数
    解析参数，配置日志，运行示例并打印结果，返回退出码
    """
    args = ARGS.parse_args(argv)

    # 日志配置
    levels = (logging.ERROR, logging.WARN, logging.INFO, logging.DEBUG)
    root_logger = logging.getLogger()
    saved_level = root_logger.level
    root_logger.setLevel(levels[min(args.level, len(levels) - 1)])
    if args.log_file:
        handler = logging.FileHandler(args.log_file, 'w', 'utf-8')
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s: %(message)s'))
    root_logger.addHandler(handler)

    try:
        DEMOS[args.demo](args, sys.stdout)
    except ValueError as e:
        print('error: %s' % (e,), file=sys.stderr)
        return BAD_ARGS
    except NoSuchField as e:
        print('error: %s' % (e,), file=sys.stderr)
        return BAD_FIELD
    finally:
        root_logger.removeHandler(handler)
        root_logger.setLevel(saved_level)
        handler.close()
    return 0


if __name__ == '__main__':
    sys.exit(main())
