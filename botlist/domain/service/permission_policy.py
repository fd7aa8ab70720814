"""Permission policy for bot mutations."""

from botlist.domain.value import Role, UserId

from .base import Service


class PermissionPolicy(Service):
    """Decides who may change directory entries.

    Stateless; used identically by update, delete and vote reset.
    """

    def can_mutate(self, role: Role, bot_owner_id: UserId, actor_id: UserId) -> bool:
        """Admins and above may change any bot, others only their own."""
        return role >= Role.ADMIN or actor_id == bot_owner_id

    def can_reset_all(self, role: Role) -> bool:
        """Only the site owner tier may reset every vote counter."""
        return role == Role.OWNER
