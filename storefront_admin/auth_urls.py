from django.urls import path
from .auth_views import AdminLoginView, AdminLogoutView, ChangeAdminPasswordView, ResetAdminPasswordView

urlpatterns = [
    path("api/admin/login/", AdminLoginView.as_view(), name="admin_login"),
    path("api/admin/logout/", AdminLogoutView.as_view(), name="admin_logout"),
    path("api/admin/change-password/", ChangeAdminPasswordView.as_view(), name="admin_change_password"),
    path("api/admin/reset-password/", ResetAdminPasswordView.as_view(), name="admin_reset_password"),
]
