"""
Role permissions - PG admin (staff user) versus tenant (user linked to a Tenant)
"""
from rest_framework import permissions


def is_pg_admin(user):
    return bool(user and user.is_authenticated and user.is_staff)


def get_tenant(user):
    """Tenant profile of a logged-in user, or None"""
    if not (user and user.is_authenticated):
        return None
    return getattr(user, 'tenant_profile', None)


class IsPGAdmin(permissions.BasePermission):
    """
    Permission to only allow the PG admin (staff users).
    """
    message = 'Admin access required.'

    def has_permission(self, request, view):
        return is_pg_admin(request.user)


class IsTenant(permissions.BasePermission):
    """
    Permission to allow users that have an active tenant profile
    """
    message = 'Only tenants can perform this action.'

    def has_permission(self, request, view):
        return get_tenant(request.user) is not None


class IsAdminOrTenant(permissions.BasePermission):
    """
    Admins see everything, tenants only what belongs to them
    """

    def has_permission(self, request, view):
        return is_pg_admin(request.user) or get_tenant(request.user) is not None

    def has_object_permission(self, request, view, obj):
        if is_pg_admin(request.user):
            return True
        tenant = get_tenant(request.user)
        owner_id = getattr(obj, 'tenant_id', None)
        return tenant is not None and owner_id == tenant.id
