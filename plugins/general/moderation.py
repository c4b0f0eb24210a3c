import hikari

from slashkit.commands import ParameterSpec, auto_register, slash


@auto_register
class ModerationCommands:
    @slash(
        "ban",
        "Ban a member from the server",
        options=[
            ParameterSpec(hikari.OptionType.USER, "member", "Member to ban", required=True),
            ParameterSpec(hikari.OptionType.STRING, "reason", "Reason for the ban"),
        ],
        permission=hikari.Permissions.BAN_MEMBERS,
    )
    async def ban(self, ctx) -> None:
        user_id = ctx.option("member")
        reason = ctx.option("reason") or "No reason provided"

        await ctx.interaction.app.rest.ban_user(ctx.guild_id, user_id, reason=reason)
        await ctx.respond(f"🔨 <@{user_id}> has been banned. Reason: {reason}")

    @slash(
        "purge",
        "Delete recent messages in this channel",
        options=[
            ParameterSpec(hikari.OptionType.INTEGER, "amount", "Messages to delete (1-100)", required=True),
        ],
        permission=hikari.Permissions.MANAGE_MESSAGES,
        permission_message="❌ Purging messages requires $PERMISSION$.",
    )
    async def purge(self, ctx) -> None:
        amount = max(1, min(int(ctx.option("amount", 1)), 100))
        rest = ctx.interaction.app.rest

        messages = await rest.fetch_messages(ctx.channel_id).limit(amount)
        await rest.delete_messages(ctx.channel_id, messages)
        await ctx.respond(f"🧹 Deleted {len(messages)} messages.", ephemeral=True)
