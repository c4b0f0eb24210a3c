import hikari

from slashkit.commands import ParameterSpec, auto_register, slash


@auto_register
class GeneralCommands:
    @slash(
        "say",
        "Make the bot say something",
        options=[
            ParameterSpec(hikari.OptionType.STRING, "text", "Text to say", required=True),
            ParameterSpec(hikari.OptionType.BOOLEAN, "embed", "Make it an embed?"),
        ],
        global_command=True,
    )
    async def say(self, ctx) -> None:
        text = ctx.option("text", "")
        if ctx.option("embed", False):
            await ctx.respond(embed=hikari.Embed(description=text))
        else:
            await ctx.respond(text)

    @slash("ping", "Check that the bot is alive", global_command=True)
    async def ping(self, ctx) -> None:
        await ctx.respond("🏓 Pong!", ephemeral=True)
