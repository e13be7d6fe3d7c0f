"""Manifests for the apps from Tube Status through World Clock."""

from __future__ import annotations

from .manifest import Manifest

_ENTRIES: tuple[dict[str, str], ...] = (
    dict(
        id="tube-status",
        name="Tube Status",
        author="dinosaursrarr",
        summary="Current status from TfL",
        desc=(
            "Shows the current status of each line on London Underground "
            "and other TfL services."
        ),
        file_name="tube_status.star",
        package_name="tubestatus",
    ),
    dict(
        id="tv-quotes",
        name="TV Quotes",
        author="rs7q5",
        summary="Display Television Quotes",
        desc="Displays Television Quotes.",
        file_name="tv_quotes.star",
        package_name="tvquotes",
    ),
    dict(
        id="twitch",
        name="Twitch",
        author="Nick Penree",
        summary="Display info from Twitch",
        desc="Display info for a Twitch username.",
        file_name="twitch.star",
        package_name="twitch",
    ),
    dict(
        id="twitter-follows",
        name="Twitter Follows",
        author="Nick Penree",
        summary="Twitter Follower Count",
        desc="Display the follower count for a provided screen name.",
        file_name="twitter_follows.star",
        package_name="twitterfollows",
    ),
    dict(
        id="unsplash",
        name="Unsplash",
        author="zephyern",
        summary="Shows random photos",
        desc="Displays a random image from Unsplash.",
        file_name="unsplash.star",
        package_name="unsplash",
    ),
    dict(
        id="usgs-earthquakes",
        name="USGS Earthquakes",
        author="Chris Silverberg",
        summary="Recent nearby earthquakes",
        desc="Displays the most recent earthquakes based on location.",
        file_name="usgs_earthquakes.star",
        package_name="usgsearthquakes",
    ),
    dict(
        id="us-yield-curve",
        name="US Yield Curve",
        author="Rob Kimball",
        summary="Plots the US yield curve",
        desc=(
            "Track changes to the yield curve over different US Treasury "
            "maturities."
        ),
        file_name="us_yield_curve.star",
        package_name="usyieldcurve",
    ),
    dict(
        id="verge-taglines",
        name="Verge Taglines",
        author="@joevgreathead",
        summary="The Verge's latest tagline",
        desc=(
            "Displays the latest tagline from the top of popular tech news "
            "site The Verge (dot com)."
        ),
        file_name="verge_taglines.star",
        package_name="vergetaglines",
    ),
    dict(
        id="vertical-message",
        name="Vertical Message",
        author="rs7q5",
        summary="Display messages vertically",
        desc="Display a message vertically.",
        file_name="vertical_message.star",
        package_name="verticalmessage",
    ),
    dict(
        id="wantedposter",
        name="WantedPoster",
        author="Robert Ison",
        summary="Display Wanted Poster",
        desc="Displays a custom wanted poster based on an image you upload.",
        file_name="wantedposter.star",
        package_name="wantedposter",
    ),
    dict(
        id="warframe-cycles",
        name="Warframe Cycles",
        author="grantmatheny",
        summary="Time in Warframe open areas",
        desc=(
            "Tells you the cycle that's active in each of the Warframe open "
            "areas and in Earth missions."
        ),
        file_name="warframe_cycles.star",
        package_name="warframecycles",
    ),
    dict(
        id="weather-map",
        name="Weather Map",
        author="Felix Bruns",
        summary="Weather Map",
        desc=(
            "Display real-time precipitation radar for a location. Powered "
            "by the RainViewer API."
        ),
        file_name="weather_map.star",
        package_name="weathermap",
    ),
    dict(
        id="web-3-counter",
        name="Web 3 Counter",
        author="Nick Kuzmik (github.com/kuzmik)",
        summary="Expose web3 as a scam",
        desc=(
            "Displays the total dollar value of lost assets due to various "
            "crypto scams, rugpulls, and crashes. Data comes from "
            "web3isgoinggreat.com, which is very tongue-in-cheek."
        ),
        file_name="web_3_counter.star",
        package_name="web3counter",
    ),
    dict(
        id="whosthatpokemon",
        name="WhosThatPokemon?",
        author="Nicole Brooks",
        summary="Pokemon Quiz Game",
        desc=(
            "Test your Pokemon Master knowledge with this rendition of "
            "\"Who's That Pokemon?\". Turn off classic mode to crank up the "
            "difficulty. Set your Tidbyt speed to ensure the animation takes "
            "up exactly half the time is has displayed."
        ),
        file_name="whosthatpokemon.star",
        package_name="whosthatpokemon",
    ),
    dict(
        id="wordlebyt",
        name="Wordlebyt",
        author="skola28",
        summary="Display daily Wordle score",
        desc=(
            "After playing Wordle on your phone, click Share>Copy text. In "
            "the Tidbyt app, paste the result into Wordlebyt."
        ),
        file_name="wordlebyt.star",
        package_name="wordlebyt",
    ),
    dict(
        id="word-of-the-day",
        name="Word Of The Day",
        author="greg-n",
        summary="Shows the Word Of The Day",
        desc="Displays the Merriam-Webster Word Of The Day.",
        file_name="word_of_the_day.star",
        package_name="wordoftheday",
    ),
    dict(
        id="world-clock",
        name="World Clock",
        author="Elliot Bentley",
        summary="Multi timezone clock",
        desc="Displays the time in up to three different locations.",
        file_name="world_clock.star",
        package_name="worldclock",
    ),
)


def manifests() -> list[Manifest]:
    """Return fresh manifests for this part of the catalog, ordered by package."""
    return [Manifest(**entry) for entry in _ENTRIES]