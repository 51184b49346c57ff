"""Entities organised by business concept.

Each entity package colocates:
- entity.py: domain model and request shapes
- table.py: database persistence model
- repository.py: data access layer
"""

from .core.user import PublicUser, User, UserRepository, UserTable
from .service.order import LineItem, Order, OrderRepository, OrderTable
from .service.product import Product, ProductRepository, ProductTable
from .service.project import Project, ProjectRepository, ProjectTable, Task, TaskTable

__all__ = [
    "LineItem",
    "Order",
    "OrderRepository",
    "OrderTable",
    "Product",
    "ProductRepository",
    "ProductTable",
    "Project",
    "ProjectRepository",
    "ProjectTable",
    "PublicUser",
    "Task",
    "TaskTable",
    "User",
    "UserRepository",
    "UserTable",
]
