"""Manifests for the apps from SpotTheStation through Tube."""

from __future__ import annotations

from .manifest import Manifest

_ENTRIES: tuple[dict[str, str], ...] = (
    dict(
        id="spotthestation",
        name="SpotTheStation",
        author="Robert Ison",
        summary="Next ISS visit overhead",
        desc="Enter your spotthestation.nasa.gov location's RSS Feed URL.",
        file_name="spotthestation.star",
        package_name="spotthestation",
    ),
    dict(
        id="state-flags",
        name="State Flags",
        author="Robert Ison",
        summary="State Flags",
        desc="Displays state flags.",
        file_name="state_flags.star",
        package_name="stateflags",
    ),
    dict(
        id="steam",
        name="Steam",
        author="Jeremy Tavener",
        summary="Steam Now Playing",
        desc=(
            "Displays current game or previous games. Use "
            "https://steamid.xyz/ to find your 17 digit Steam ID."
        ),
        file_name="steam.star",
        package_name="steam",
    ),
    dict(
        id="step-counter",
        name="Step Counter",
        author="Matt-Pesce",
        summary="Tracks Daily Step Progress",
        desc=(
            "Fetches your Step Data from Google Fit, Reports progress "
            "versus daily goal."
        ),
        file_name="stepcounter.star",
        package_name="stepcounter",
    ),
    dict(
        id="stock-ticker",
        name="Stock Ticker",
        author="Matt Holloway",
        summary="3 stocks scrolling",
        desc=(
            "This is a simple stock ticker app, that will display a stock "
            "ticker for 3 stock symbols.  If you want more, spin up a second "
            "copy of the app to have more stocks tick. Requires a free API "
            "key from alphavantage.co."
        ),
        file_name="stock_ticker.star",
        package_name="stockticker",
    ),
    dict(
        id="strava",
        name="Strava",
        author="Rob Kimball",
        summary="Displays athlete stats",
        desc="Displays your YTD or all-time athlete stats recorded on Strava.",
        file_name="strava.star",
        package_name="strava",
    ),
    dict(
        id="subreddit",
        name="Subreddit",
        author="Petros Fytilis",
        summary="Subreddit post",
        desc="Display the #1 post of a subreddit.",
        file_name="subreddit.star",
        package_name="subreddit",
    ),
    dict(
        id="sunrise-sunset",
        name="Sunrise Sunset",
        author="Alan Fleming",
        summary="Shows sunrise and set times",
        desc="Displays with icon sunrise and sunset times.",
        file_name="sunrise_sunset.star",
        package_name="sunrisesunset",
    ),
    dict(
        id="super-mario-kart",
        name="Super Mario Kart",
        author="Kevin Connell",
        summary="Super Mario Kart Animation",
        desc="Animated characters & items from the 1992 Super Mario Kart game.",
        file_name="super_mario_kart.star",
        package_name="supermariokart",
    ),
    dict(
        id="surf-forecast",
        name="Surf Forecast",
        author="smith-kyle",
        summary="Daily surf forecast",
        desc="Daily surf forecast for any spot on Surfline.",
        file_name="surf_forecast.star",
        package_name="surfforecast",
    ),
    dict(
        id="surflive",
        name="Surflive",
        author="Rémi Carton",
        summary="Live surf conditions",
        desc="Shows the current surf conditions for a surf spot.",
        file_name="surflive.star",
        package_name="surflive",
    ),
    dict(
        id="tartan",
        name="Tartan",
        author="dinosaursrarr",
        summary="Weaves tartans to look at",
        desc=(
            "Renders a tartan based on thread count instructions and "
            "displays it on screen."
        ),
        file_name="tartan.star",
        package_name="tartan",
    ),
    dict(
        id="tcat-bus-arrivals",
        name="TCAT Bus Arrivals",
        author="Harry Samuels",
        summary="Show TCAT arrival times",
        desc="Display Arrival Times for TCAT Ithaca Buses at a Specific Stop.",
        file_name="tcat_bus_arrivals.star",
        package_name="tcatbusarrivals",
    ),
    dict(
        id="tempest",
        name="Tempest Weather",
        author="Rohan Singh",
        summary="Tempest weather station",
        desc="Show readings from your Tempest weather station.",
        file_name="tempest.star",
        package_name="tempest",
    ),
    dict(
        id="test-patterns",
        name="Test Patterns",
        author="harrisonpage",
        summary="Pretty test patterns",
        desc="Test patterns are as old as TV broadcasts.",
        file_name="test_patterns.star",
        package_name="testpatterns",
    ),
    dict(
        id="they-said-so",
        name="They Said So",
        author="Henry So, Jr.",
        summary="Quote of the Day",
        desc="Quote of the day powered by theysaidso.com.",
        file_name="they_said_so.star",
        package_name="theysaidso",
    ),
    dict(
        id="tindie-sales",
        name="Tindie Sales",
        author="Joey Castillo",
        summary="Shows Tindie sales numbers",
        desc=(
            "Tindie is an online marketplace for maker-made products. This "
            "app displays sales stats for your Tindie store."
        ),
        file_name="tindie_sales.star",
        package_name="tindiesales",
    ),
    dict(
        id="todoist",
        name="Todoist",
        author="zephyern",
        summary="Integration with Todoist",
        desc="Shows the number of tasks you have due today.",
        file_name="todoist.star",
        package_name="todoist",
    ),
    dict(
        id="todoist-next",
        name="Todoist Next",
        author="Alisdair/Akeslo",
        summary="Todoist next due/overdue",
        desc="Displays the next due or overdue task from todoist.",
        file_name="todoist_next.star",
        package_name="todoistnext",
    ),
    dict(
        id="traffic",
        name="Traffic",
        author="Rob Kimball",
        summary="Time to your destination",
        desc=(
            "Shows your estimated travel duration using traffic information "
            "from Bing/MapQuest."
        ),
        file_name="traffic.star",
        package_name="traffic",
    ),
    dict(
        id="transsee",
        name="TransSee",
        author="[email]",
        summary="Realtime transit prediction",
        desc=(
            "Provides real-time transit predictions based on actual travel "
            "times for over 150 agencies. Requires paid premium. See "
            "transsee.ca/tidbyt for usage information."
        ),
        file_name="transsee.star",
        package_name="transsee",
    ),
    dict(
        id="tube",
        name="Tube",
        author="dinosaursrarr",
        summary="London Underground arrivals",
        desc="Upcoming arrivals for a particular Tube station.",
        file_name="tube.star",
        package_name="tube",
    ),
)


def manifests() -> list[Manifest]:
    """Return fresh manifests for this part of the catalog, ordered by package."""
    return [Manifest(**entry) for entry in _ENTRIES]