"""Employee URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.employees.views import EmployeeViewSet

router = SimpleRouter(trailing_slash=False)
router.register("employees", EmployeeViewSet, basename="employee")

urlpatterns = router.urls
