from sqlcompose.statement.builder.mixins._join import JoinClauseMixin
from sqlcompose.statement.builder.mixins._limit_offset import LimitOffsetClauseMixin
from sqlcompose.statement.builder.mixins._order_by import OrderByClauseMixin
from sqlcompose.statement.builder.mixins._where import WhereClauseMixin

__all__ = ("JoinClauseMixin", "LimitOffsetClauseMixin", "OrderByClauseMixin", "WhereClauseMixin")
