"""
Crisis Catalog — historical episodes and their pre-crisis macro snapshots.

Sources:
  - Reinhart & Rogoff, "This Time is Different" (crisis dates, outcomes)
  - Dalio, "Principles for Navigating Big Debt Crises" (debt cycle phases)
  - Handbook of International Economics Vol. 3: Krugman (1979), Obstfeld (1994),
    Calvo (1998), Eichengreen/Hausmann/Panizza "Original Sin"

Pre-crisis snapshots exist only for the episodes where a full set of
comparable macro figures could be assembled. Every key in CRISIS_CONDITIONS
must name an entry in CRISIS_EVENTS; the repository checks the join on load.
"""
from __future__ import annotations

from knowledge_base.crisis_schema import (
    CapitalFlowEvent,
    CountryDebtProfile,
    CrisisConditions,
    CrisisEvent,
    CrisisGenerationModel,
    CrisisId,
    CurrentConditions,
    DebtCyclePhase,
)


# ─── Crisis Events ──────────────────────────────────────────────────────────

CRISIS_EVENTS: list[CrisisEvent] = [

    # ══════════════════════════════════════════════════════════════════════
    # 1800s
    # ══════════════════════════════════════════════════════════════════════

    CrisisEvent(
        id=CrisisId("uk-1825-banking"), name="Panic of 1825", year=1825,
        country="United Kingdom", country_code="GB", region="Europe",
        type="banking", severity=4,
        description="First modern international financial crisis. Triggered by speculative "
                    "investments in Latin American bonds and mines.",
        gdp_decline=5, recovery_years=3, bank_failures=70,
        causes=("Latin American speculation", "Bank of England credit expansion",
                "Post-Napoleonic War boom"),
        consequences=("70+ bank failures", "Credit contraction", "Economic recession",
                      "Bank of England reforms"),
    ),
    CrisisEvent(
        id=CrisisId("us-1837-banking"), name="Panic of 1837", year=1837, end_year=1843,
        country="United States", country_code="US", region="Americas",
        type="banking", severity=5,
        description="Major financial crisis leading to a 6-year depression.",
        gdp_decline=33, recovery_years=6, bank_failures=343,
        causes=("Speculation in western lands", "Specie Circular",
                "Bank of England credit tightening", "End of Second Bank"),
        consequences=("343 banks closed", "6-year depression", "High unemployment",
                      "State debt defaults"),
    ),
    CrisisEvent(
        id=CrisisId("ireland-1845-famine"), name="Great Irish Famine",
        year=1845, end_year=1852,
        country="Ireland", country_code="IE", region="Europe",
        type="sovereign_debt", severity=5,
        description="Potato blight combined with colonial economic policies led to mass "
                    "starvation and emigration.",
        gdp_decline=40, recovery_years=20,
        causes=("Potato blight", "British economic policies", "Land ownership structure"),
        consequences=("1 million deaths", "1 million emigrated", "Population halved",
                      "Long-term economic devastation"),
    ),
    CrisisEvent(
        id=CrisisId("us-1857-banking"), name="Panic of 1857", year=1857,
        country="United States", country_code="US", region="Americas",
        type="banking", severity=4,
        description="First worldwide economic crisis. Triggered by declining international "
                    "trade and railroad speculation.",
        gdp_decline=8, recovery_years=2, bank_failures=900,
        causes=("Railroad speculation", "Declining grain prices", "Ohio Life Insurance failure"),
        consequences=("5,000 businesses failed", "High unemployment", "Western expansion slowdown"),
    ),
    CrisisEvent(
        id=CrisisId("us-1873-banking"), name="Long Depression (Panic of 1873)",
        year=1873, end_year=1879,
        country="United States", country_code="US", region="Americas",
        type="banking", severity=5,
        description="Triggered by the Jay Cooke & Company failure. Led to a 6-year global depression.",
        gdp_decline=15, recovery_years=6, bank_failures=89,
        causes=("Railroad overbuilding", "Post-Civil War speculation", "Demonetization of silver"),
        consequences=("18,000 businesses failed", "Unemployment above 14%",
                      "Railroad bankruptcies", "Labor unrest"),
    ),
    CrisisEvent(
        id=CrisisId("argentina-1890-debt"), name="Baring Crisis", year=1890,
        country="Argentina", country_code="AR", region="Americas",
        type="sovereign_debt", severity=5,
        description="Argentina defaulted on debt, nearly bringing down Barings Bank.",
        gdp_decline=17, recovery_years=5, debt_to_gdp=80,
        causes=("Excessive foreign borrowing", "Land speculation", "Political instability"),
        consequences=("Baring Brothers bailout", "President resignation", "Capital flight",
                      "Peso depreciation"),
    ),
    CrisisEvent(
        id=CrisisId("us-1893-banking"), name="Panic of 1893", year=1893, end_year=1897,
        country="United States", country_code="US", region="Americas",
        type="banking", severity=4,
        description="Railroad overbuilding and shaky railroad financing led to bank runs "
                    "and a severe depression.",
        gdp_decline=12, recovery_years=4, bank_failures=500,
        causes=("Railroad overbuilding", "Gold standard pressure",
                "Philadelphia & Reading bankruptcy"),
        consequences=("500+ bank failures", "15,000 businesses failed", "18% unemployment"),
    ),
    CrisisEvent(
        id=CrisisId("us-1907-banking"), name="Panic of 1907", year=1907,
        country="United States", country_code="US", region="Americas",
        type="banking", severity=4,
        description="Trust company crisis requiring J.P. Morgan's intervention.",
        gdp_decline=11, recovery_years=2, bank_failures=25,
        causes=("Knickerbocker Trust failure", "Copper market manipulation", "Lack of central bank"),
        consequences=("Stock market fell 50%", "Bank runs", "J.P. Morgan bailout",
                      "Federal Reserve creation (1913)"),
    ),

    # ══════════════════════════════════════════════════════════════════════
    # 1920s-1930s
    # ══════════════════════════════════════════════════════════════════════

    CrisisEvent(
        id=CrisisId("germany-1923-inflation"), name="Weimar Hyperinflation",
        year=1921, end_year=1923,
        country="Germany", country_code="DE", region="Europe",
        type="inflation", severity=5,
        description="Most famous hyperinflation in history. Prices doubled every few days at peak.",
        peak_inflation=29500, currency_decline=99.99,
        causes=("WWI reparations", "Money printing", "Ruhr occupation", "Political instability"),
        consequences=("Middle class wiped out", "Political radicalization",
                      "Currency reform (Rentenmark)", "Rise of extremism"),
        crisis_generation="1st",
    ),
    CrisisEvent(
        id=CrisisId("uk-1925-currency"), name="Return to Gold Standard",
        year=1925, end_year=1931,
        country="United Kingdom", country_code="GB", region="Europe",
        type="currency", severity=3,
        description="Return to pre-war gold parity overvalued the pound, depressing exports.",
        gdp_decline=5, currency_decline=25,
        causes=("Overvalued exchange rate", "Deflationary policies", "Coal industry decline"),
        consequences=("High unemployment", "General Strike 1926", "Departure from gold 1931"),
    ),
    CrisisEvent(
        id=CrisisId("us-1929-stock"), name="Wall Street Crash / Great Depression",
        year=1929, end_year=1933,
        country="United States", country_code="US", region="Americas",
        type="stock_market", severity=5,
        description="The most severe economic depression of the 20th century. "
                    "Stock market lost 89% of value.",
        gdp_decline=30, recovery_years=10, bank_failures=9000,
        causes=("Stock speculation", "Margin buying", "Fed tightening", "Smoot-Hawley tariffs"),
        consequences=("25% unemployment", "9,000 bank failures", "Global depression",
                      "New Deal reforms"),
    ),
    CrisisEvent(
        id=CrisisId("germany-1931-banking"), name="German Banking Crisis", year=1931,
        country="Germany", country_code="DE", region="Europe",
        type="banking", severity=5,
        description="Major banks failed including Danat Bank, after the Credit-Anstalt collapse.",
        gdp_decline=25, recovery_years=3, bank_failures=100,
        causes=("Credit-Anstalt contagion", "Capital flight", "Reparations burden",
                "Deflationary spiral"),
        consequences=("Bank holiday", "Capital controls", "Political instability"),
    ),
    CrisisEvent(
        id=CrisisId("austria-1931-banking"), name="Credit-Anstalt Collapse", year=1931,
        country="Austria", country_code="AT", region="Europe",
        type="banking", severity=5,
        description="Austria's largest bank failed, triggering bank runs across Central Europe.",
        gdp_decline=22, recovery_years=4,
        causes=("Merger with failed banks", "Agricultural depression", "German bank exposure"),
        consequences=("European banking crisis", "Capital flight", "Currency controls"),
    ),

    # ══════════════════════════════════════════════════════════════════════
    # Post-WWII to 1990s
    # ══════════════════════════════════════════════════════════════════════

    CrisisEvent(
        id=CrisisId("uk-1976-currency"), name="Sterling Crisis / IMF Bailout", year=1976,
        country="United Kingdom", country_code="GB", region="Europe",
        type="currency", severity=3,
        description="UK forced to seek an IMF bailout as the pound collapsed.",
        currency_decline=25, debt_to_gdp=65,
        causes=("High inflation", "Trade union power", "Oil crisis", "Budget deficit"),
        consequences=("IMF conditions", "Public spending cuts", "Monetarist turn"),
        crisis_generation="1st",
    ),
    CrisisEvent(
        id=CrisisId("latam-1982-debt"), name="Latin American Debt Crisis",
        year=1982, end_year=1989,
        country="Mexico", country_code="MX", region="Americas",
        type="sovereign_debt", severity=5,
        description="Mexico's default triggered a region-wide debt crisis and a lost decade.",
        gdp_decline=5, recovery_years=7, debt_to_gdp=85,
        causes=("Oil price crash", "US interest rate spike", "Overborrowing", "Peso overvaluation"),
        consequences=("Debt restructuring", "Lost decade", "Brady Plan", "Washington Consensus"),
        crisis_generation="1st",
    ),
    CrisisEvent(
        id=CrisisId("us-1987-stock"), name="Black Monday", year=1987,
        country="United States", country_code="US", region="Americas",
        type="stock_market", severity=3,
        description="Largest one-day percentage decline in stock market history. Dow fell 22.6%.",
        gdp_decline=0, recovery_years=2,
        causes=("Program trading", "Portfolio insurance", "Trade deficit fears",
                "Rising interest rates"),
        consequences=("Circuit breakers implemented", "Fed liquidity injection", "Quick recovery"),
    ),
    CrisisEvent(
        id=CrisisId("japan-1990-asset"), name="Japanese Asset Bubble Collapse",
        year=1990, end_year=2003,
        country="Japan", country_code="JP", region="Asia",
        type="stock_market", severity=5,
        description="Stock and real estate bubble burst, leading to the Lost Decades.",
        gdp_decline=2, recovery_years=13,
        causes=("Asset bubble", "BOJ rate hikes", "Land price speculation", "Bank overexposure"),
        consequences=("Lost Decades", "Deflation", "Zombie banks", "Zero interest rates"),
    ),
    CrisisEvent(
        id=CrisisId("uk-1992-currency"), name="Black Wednesday / ERM Crisis", year=1992,
        country="United Kingdom", country_code="GB", region="Europe",
        type="currency", severity=3,
        description="UK forced out of the Exchange Rate Mechanism after a speculative attack.",
        currency_decline=15,
        causes=("Overvalued pound in ERM", "German unification rates", "Soros speculation"),
        consequences=("ERM exit", "£3.3bn losses", "Inflation targeting adopted"),
        crisis_generation="2nd",
    ),
    CrisisEvent(
        id=CrisisId("mexico-1994-currency"), name="Tequila Crisis", year=1994, end_year=1995,
        country="Mexico", country_code="MX", region="Americas",
        type="currency", severity=4,
        description="Peso collapsed after foreign reserves were depleted.",
        gdp_decline=6, recovery_years=2, currency_decline=50,
        causes=("Current account deficit", "Political instability", "Peso peg defense",
                "Rising US rates"),
        consequences=("$50bn bailout", "Banking crisis", "Contagion to Latin America"),
        crisis_generation="1st",
    ),
    CrisisEvent(
        id=CrisisId("asia-1997-currency"), name="Asian Financial Crisis", year=1997, end_year=1998,
        country="Thailand", country_code="TH", region="Asia",
        type="currency", severity=5,
        description="Started in Thailand and spread across East Asia.",
        gdp_decline=13, recovery_years=3, currency_decline=50,
        causes=("Pegged currencies", "Current account deficits", "Short-term foreign debt",
                "Speculation"),
        consequences=("IMF bailouts", "Currency floats", "Asian reserves buildup"),
        crisis_generation="3rd",
    ),
    CrisisEvent(
        id=CrisisId("russia-1998-debt"), name="Russian Financial Crisis", year=1998,
        country="Russia", country_code="RU", region="Europe",
        type="sovereign_debt", severity=5,
        description="Russia defaulted on domestic debt and devalued the ruble.",
        gdp_decline=5, recovery_years=2, debt_to_gdp=95, currency_decline=70,
        causes=("Low oil prices", "Asian contagion", "Fiscal deficit", "GKO pyramid"),
        consequences=("Debt default", "70% devaluation", "LTCM bailout"),
        crisis_generation="3rd",
    ),

    # ══════════════════════════════════════════════════════════════════════
    # 2000s onward
    # ══════════════════════════════════════════════════════════════════════

    CrisisEvent(
        id=CrisisId("us-2000-stock"), name="Dot-com Bubble Burst", year=2000, end_year=2002,
        country="United States", country_code="US", region="Americas",
        type="stock_market", severity=3,
        description="Technology stock bubble burst. NASDAQ fell 78% from peak.",
        gdp_decline=0.3, recovery_years=3,
        causes=("Tech speculation", "IPO mania", "Overvaluation", "Fed tightening"),
        consequences=("$5 trillion lost", "Tech sector layoffs", "Recession 2001"),
    ),
    CrisisEvent(
        id=CrisisId("argentina-2001-debt"), name="Argentine Great Depression",
        year=2001, end_year=2002,
        country="Argentina", country_code="AR", region="Americas",
        type="sovereign_debt", severity=5,
        description="Largest sovereign default in history at the time. Peso peg collapsed.",
        gdp_decline=18, recovery_years=3, debt_to_gdp=150, currency_decline=70,
        causes=("Currency board rigidity", "Fiscal deficits", "Overvaluation", "Global crisis"),
        consequences=("$93bn default", "Corralito bank freeze", "Peso float"),
        crisis_generation="3rd",
    ),
    CrisisEvent(
        id=CrisisId("us-2008-banking"), name="Global Financial Crisis", year=2008, end_year=2009,
        country="United States", country_code="US", region="Americas",
        type="banking", severity=5,
        description="Worst financial crisis since the Great Depression.",
        gdp_decline=4.3, recovery_years=4, bank_failures=465,
        causes=("Subprime mortgages", "CDOs and derivatives", "Excessive leverage",
                "Rating agency failures"),
        consequences=("$700bn TARP", "QE begins", "Dodd-Frank", "European debt crisis"),
        crisis_generation="3rd",
    ),
    CrisisEvent(
        id=CrisisId("iceland-2008-banking"), name="Icelandic Financial Crisis", year=2008,
        country="Iceland", country_code="IS", region="Europe",
        type="banking", severity=5,
        description="All major banks failed. Banking system assets were 10x GDP.",
        gdp_decline=10, recovery_years=4, currency_decline=50,
        causes=("Bank overexpansion", "Foreign currency borrowing", "Asset-liability mismatch"),
        consequences=("All banks nationalized", "IMF bailout", "Capital controls"),
        crisis_generation="3rd",
    ),
    CrisisEvent(
        id=CrisisId("greece-2010-debt"), name="Greek Debt Crisis", year=2010, end_year=2018,
        country="Greece", country_code="GR", region="Europe",
        type="sovereign_debt", severity=5,
        description="Sovereign debt crisis requiring multiple EU/IMF bailouts.",
        gdp_decline=25, recovery_years=8, debt_to_gdp=180,
        causes=("Hidden deficits", "Eurozone rigidity", "Competitiveness gap", "Tax evasion"),
        consequences=("€289bn bailouts", "Severe austerity", "Capital controls"),
    ),
    CrisisEvent(
        id=CrisisId("cyprus-2013-banking"), name="Cypriot Financial Crisis", year=2013,
        country="Cyprus", country_code="CY", region="Europe",
        type="banking", severity=4,
        description="Banking crisis led to the first bail-in of depositors in the Eurozone.",
        gdp_decline=6, recovery_years=4,
        causes=("Greek debt exposure", "Oversized banking sector", "Russian deposits"),
        consequences=("Deposit bail-in", "€10bn bailout", "Capital controls"),
    ),
    CrisisEvent(
        id=CrisisId("china-2015-stock"), name="Chinese Stock Market Crash", year=2015,
        country="China", country_code="CN", region="Asia",
        type="stock_market", severity=3,
        description="Shanghai Composite fell 40%.",
        gdp_decline=0,
        causes=("Margin trading explosion", "Retail speculation", "Government encouragement"),
        consequences=("Trading halts", "Yuan devaluation", "Capital outflows"),
    ),
    CrisisEvent(
        id=CrisisId("venezuela-2016-inflation"), name="Venezuelan Hyperinflation",
        year=2016, end_year=2024,
        country="Venezuela", country_code="VE", region="Americas",
        type="inflation", severity=5,
        description="Hyperinflation with peak rates over 1 million percent annually.",
        gdp_decline=75, peak_inflation=1_000_000, currency_decline=99.99,
        causes=("Oil price collapse", "Money printing", "Price controls", "Sanctions"),
        consequences=("Mass emigration", "Humanitarian crisis", "Dollarization"),
    ),
    CrisisEvent(
        id=CrisisId("turkey-2018-currency"), name="Turkish Currency Crisis", year=2018,
        country="Turkey", country_code="TR", region="Europe",
        type="currency", severity=4,
        description="Lira lost 40% of value amid concerns over central bank independence.",
        currency_decline=40, peak_inflation=25,
        causes=("Current account deficit", "Foreign currency debt", "Political interference",
                "US sanctions"),
        consequences=("Emergency rate hikes", "Inflation surge", "Recession"),
        crisis_generation="3rd",
    ),
    CrisisEvent(
        id=CrisisId("argentina-2018-currency"), name="Argentine Currency Crisis", year=2018,
        country="Argentina", country_code="AR", region="Americas",
        type="currency", severity=4,
        description="Peso lost 50% of value. Required a $57 billion IMF program.",
        currency_decline=50, peak_inflation=54, debt_to_gdp=86,
        causes=("Fiscal deficit", "Rising US rates", "Inflation", "Capital flight"),
        consequences=("$57bn IMF deal", "Austerity measures", "Default 2020"),
    ),
    CrisisEvent(
        id=CrisisId("global-2020-pandemic"), name="COVID-19 Market Crash", year=2020,
        country="Global", country_code="WORLD", region="Global",
        type="stock_market", severity=4,
        description="Fastest 30% decline in history. Unprecedented monetary and fiscal response.",
        gdp_decline=3.1, recovery_years=1,
        causes=("COVID-19 pandemic", "Lockdowns", "Supply chain disruption", "Demand collapse"),
        consequences=("Unprecedented stimulus", "Fed QE infinity", "Inflation surge"),
    ),
    CrisisEvent(
        id=CrisisId("uk-2022-gilts"), name="UK Gilt Crisis", year=2022,
        country="United Kingdom", country_code="GB", region="Europe",
        type="sovereign_debt", severity=3,
        description="Mini-budget triggered a gilt market crisis, requiring BoE intervention.",
        currency_decline=10,
        causes=("Unfunded tax cuts", "Pension fund leverage", "Rising rates", "Market confidence"),
        consequences=("BoE intervention", "Prime Minister resignation", "Budget reversal"),
    ),
    CrisisEvent(
        id=CrisisId("us-2023-banking"), name="Regional Banking Crisis", year=2023,
        country="United States", country_code="US", region="Americas",
        type="banking", severity=3,
        description="SVB, Signature, and First Republic failures.",
        bank_failures=4,
        causes=("Rising interest rates", "HTM portfolio losses", "Uninsured deposits",
                "Bank run via social media"),
        consequences=("FDIC takeovers", "Fed BTFP facility", "Regulatory review"),
    ),
]


# ─── Pre-Crisis Conditions ──────────────────────────────────────────────────
# Snapshot of the macro picture just before each episode broke.
# Ordering here is the catalog order used for similarity tie-breaks.

CRISIS_CONDITIONS: dict[CrisisId, CrisisConditions] = {
    CrisisId("us-1929-stock"): CrisisConditions(
        debt_to_gdp=16, private_debt=160, interest_rates=6, inflation=0,
        unemployment=3.2, yield_curve=0.5, stock_valuation=32,
        current_account_gdp=0.5, foreign_currency_debt=0, short_term_debt_reserves=15,
        real_exchange_rate_deviation=5, capital_flow_risk="low",
        characteristics=("Excessive margin debt", "Stock speculation mania",
                         "Bank overexposure to stocks", "Weak agricultural sector"),
    ),
    CrisisId("japan-1990-asset"): CrisisConditions(
        debt_to_gdp=65, private_debt=210, interest_rates=5.25, inflation=3.1,
        unemployment=2.1, yield_curve=-0.3, stock_valuation=70,
        current_account_gdp=1.5, foreign_currency_debt=5, short_term_debt_reserves=20,
        real_exchange_rate_deviation=35, capital_flow_risk="low",
        characteristics=("Real estate bubble", "Stock market at record highs",
                         "Excessive corporate leverage", "Strong yen appreciation"),
    ),
    CrisisId("us-2008-banking"): CrisisConditions(
        debt_to_gdp=65, private_debt=175, interest_rates=5.02, inflation=2.8,
        unemployment=4.6, yield_curve=0.2, stock_valuation=27,
        current_account_gdp=-5.1, foreign_currency_debt=0, short_term_debt_reserves=25,
        real_exchange_rate_deviation=-10, capital_flow_risk="medium",
        characteristics=("Housing bubble", "Subprime mortgage exposure",
                         "Bank leverage at extremes", "CDO/derivative complexity"),
    ),
    CrisisId("greece-2010-debt"): CrisisConditions(
        debt_to_gdp=127, private_debt=120, interest_rates=1, inflation=4.7,
        unemployment=9.6, yield_curve=2.5, stock_valuation=15,
        current_account_gdp=-10.1, foreign_currency_debt=0,  # euro, but no devaluation option
        short_term_debt_reserves=0, real_exchange_rate_deviation=20,
        capital_flow_risk="high",
        characteristics=("Unsustainable fiscal deficits", "Hidden government debt",
                         "Eurozone rigidity", "Competitiveness gap"),
    ),
    CrisisId("argentina-2001-debt"): CrisisConditions(
        debt_to_gdp=54, private_debt=45, interest_rates=25, inflation=-1.1,
        unemployment=18, yield_curve=-5, stock_valuation=10,
        current_account_gdp=-3.2, foreign_currency_debt=85, short_term_debt_reserves=180,
        real_exchange_rate_deviation=40, capital_flow_risk="high",
        characteristics=("Currency peg unsustainable", "Fiscal deficit spiral",
                         "External debt burden", "High original sin (FX debt)",
                         "Political instability"),
    ),
    CrisisId("germany-1923-inflation"): CrisisConditions(
        debt_to_gdp=40, private_debt=20, interest_rates=5, inflation=29500,
        unemployment=4, yield_curve=0, stock_valuation=5,
        current_account_gdp=-5, foreign_currency_debt=80,  # reparations in gold/foreign currency
        short_term_debt_reserves=500, real_exchange_rate_deviation=-95,
        capital_flow_risk="high",
        characteristics=("War reparations burden", "Money printing spiral",
                         "Currency collapse", "Political chaos"),
    ),
    CrisisId("global-2020-pandemic"): CrisisConditions(
        debt_to_gdp=108, private_debt=150, interest_rates=1.5, inflation=2.3,
        unemployment=3.5, yield_curve=0.3, stock_valuation=31,
        current_account_gdp=-2.8, foreign_currency_debt=0, short_term_debt_reserves=30,
        real_exchange_rate_deviation=0, capital_flow_risk="medium",
        characteristics=("External shock (pandemic)", "High valuations pre-crisis",
                         "Low rates pre-crisis", "High corporate debt"),
    ),
    CrisisId("asia-1997-currency"): CrisisConditions(
        debt_to_gdp=35, private_debt=120, interest_rates=8, inflation=5.8,
        unemployment=2.5, yield_curve=1, stock_valuation=20,
        current_account_gdp=-7.9, foreign_currency_debt=70, short_term_debt_reserves=200,
        real_exchange_rate_deviation=25, capital_flow_risk="high",
        characteristics=("Pegged currencies", "Short-term FX debt > reserves",
                         "Current account deficits", "Capital flow bonanza ending"),
    ),
}


# ─── Current Conditions ─────────────────────────────────────────────────────
# Default "now" snapshot (United States). Callers pass their own snapshot to
# the scorer; this is just the bundled fixture.

CURRENT_CONDITIONS = CurrentConditions(
    debt_to_gdp=123, private_debt=150, interest_rates=5.33, inflation=3.2,
    unemployment=4.2, yield_curve=0.5, stock_valuation=32,
    current_account_gdp=-3.0,
    foreign_currency_debt=0,        # borrows in own currency
    short_term_debt_reserves=35,
    real_exchange_rate_deviation=5,
    capital_flow_risk="low",        # safe haven
    characteristics=(
        "High government debt levels",
        "Elevated interest rates after rapid hikes",
        "Inflation moderating but above target",
        "Tight labor market",
        "High equity valuations",
        "Commercial real estate stress",
        "Reserve currency issuer (safe haven)",
        "No original sin exposure",
    ),
)


# ─── Debt Cycle Phases ──────────────────────────────────────────────────────

DEBT_CYCLE_PHASES: list[DebtCyclePhase] = [
    # Long-term debt cycle (post-WWII to present)
    DebtCyclePhase(
        id="postwar-recovery", name="Post-War Recovery", start_year=1945, end_year=1965,
        cycle_type="long_term", phase="early",
        interest_rate_trend="low", debt_trend="falling", asset_prices="rising",
        description="Post-WWII reconstruction. Low debt, rising productivity, strong growth.",
        characteristics=("Government debt declining from WWII highs", "Strong productivity growth",
                         "Gold-backed dollar (Bretton Woods)", "Fiscal discipline"),
    ),
    DebtCyclePhase(
        id="great-moderation-start", name="Expansion Era", start_year=1965, end_year=1980,
        cycle_type="long_term", phase="bubble",
        interest_rate_trend="rising", debt_trend="rising", asset_prices="stable",
        description="Vietnam War spending, Great Society programs. Inflation rising.",
        characteristics=("Rising government spending", "Nixon ends gold standard (1971)",
                         "Oil shocks", "Stagflation"),
    ),
    DebtCyclePhase(
        id="volcker-era", name="Volcker Shock", start_year=1980, end_year=1982,
        cycle_type="long_term", phase="top",
        interest_rate_trend="high", debt_trend="stable", asset_prices="falling",
        description="Fed raises rates to 20% to break inflation. Severe recession.",
        characteristics=("Fed funds rate hits 20%", "Deep recession", "Inflation broken",
                         "LatAm debt crisis triggered"),
    ),
    DebtCyclePhase(
        id="great-moderation", name="Great Moderation", start_year=1982, end_year=2007,
        cycle_type="long_term", phase="normalization",
        interest_rate_trend="falling", debt_trend="rising", asset_prices="rising",
        description="Long expansion with falling rates, rising asset prices, "
                    "increasing private debt.",
        characteristics=("25-year bull market in bonds", "Disinflation",
                         "Financial deregulation", "Credit expansion"),
    ),
    DebtCyclePhase(
        id="gfc-deleveraging", name="Financial Crisis & QE Era", start_year=2008, end_year=2019,
        cycle_type="long_term", phase="deleveraging",
        interest_rate_trend="low", debt_trend="rising", asset_prices="rising",
        description="Private sector deleveraging, public sector debt expansion, QE.",
        characteristics=("Zero interest rates", "Quantitative easing", "Government debt surge",
                         "Slow recovery"),
    ),
    DebtCyclePhase(
        id="pandemic-response", name="Pandemic Response", start_year=2020, end_year=2022,
        cycle_type="long_term", phase="depression",
        interest_rate_trend="low", debt_trend="rising", asset_prices="rising",
        description="Unprecedented monetary and fiscal stimulus in response to COVID-19.",
        characteristics=("Unlimited QE", "Direct fiscal transfers", "Debt explosion",
                         "Inflation surge"),
    ),
    DebtCyclePhase(
        id="rate-normalization", name="Rate Normalization", start_year=2022, end_year=2026,
        cycle_type="long_term", phase="top",
        interest_rate_trend="high", debt_trend="stable", asset_prices="falling",
        description="Fastest rate hike cycle in decades to combat inflation.",
        characteristics=("Fastest rate hikes since 1980s", "QT (balance sheet reduction)",
                         "Banking stress", "Debt servicing strain"),
    ),

    # Short-term business cycles (selected recent ones)
    DebtCyclePhase(
        id="dotcom-recession", name="Dot-com Recession", start_year=2001, end_year=2001,
        cycle_type="short_term", phase="depression",
        interest_rate_trend="falling", debt_trend="stable", asset_prices="falling",
        description="Mild recession following the tech bubble burst and 9/11.",
        characteristics=("Tech bubble burst", "Business investment decline", "Fed rate cuts"),
    ),
    DebtCyclePhase(
        id="housing-boom", name="Housing Boom", start_year=2003, end_year=2006,
        cycle_type="short_term", phase="bubble",
        interest_rate_trend="rising", debt_trend="rising", asset_prices="rising",
        description="Housing bubble fueled by low rates and subprime lending.",
        characteristics=("Housing prices surge", "Subprime expansion", "CDO boom"),
    ),
    DebtCyclePhase(
        id="great-recession", name="Great Recession", start_year=2007, end_year=2009,
        cycle_type="short_term", phase="depression",
        interest_rate_trend="falling", debt_trend="falling", asset_prices="falling",
        description="Worst recession since the Great Depression, triggered by the housing crash.",
        characteristics=("Housing crash", "Bank failures", "Credit freeze", "Unemployment surge"),
    ),
    DebtCyclePhase(
        id="recovery-2010s", name="Post-Crisis Recovery", start_year=2010, end_year=2019,
        cycle_type="short_term", phase="normalization",
        interest_rate_trend="low", debt_trend="stable", asset_prices="rising",
        description="Slow but steady recovery from the Great Recession.",
        characteristics=("Slow growth", "Job recovery", "Low inflation", "Stock market boom"),
    ),
    DebtCyclePhase(
        id="covid-recession", name="COVID Recession", start_year=2020, end_year=2020,
        cycle_type="short_term", phase="depression",
        interest_rate_trend="falling", debt_trend="rising", asset_prices="falling",
        description="Shortest but deepest recession on record.",
        characteristics=("Lockdown shock", "Service sector collapse", "Massive stimulus"),
    ),
    DebtCyclePhase(
        id="inflation-era", name="Inflation Era", start_year=2021, end_year=2023,
        cycle_type="short_term", phase="bubble",
        interest_rate_trend="rising", debt_trend="stable", asset_prices="stable",
        description="Post-pandemic boom with the highest inflation in 40 years.",
        characteristics=("Inflation surge", "Tight labor market", "Rate hikes begin"),
    ),
]


# ─── Crisis Generation Models ───────────────────────────────────────────────

CRISIS_GENERATION_MODELS: list[CrisisGenerationModel] = [
    CrisisGenerationModel(
        generation="1st",
        name="Fundamental-Based Crisis Model",
        theorists=("Paul Krugman",),
        year=1979,
        mechanism="Unsustainable fiscal policies lead to reserve depletion and speculative "
                  "attacks on currency pegs.",
        description="Governments running persistent deficits and monetizing debt exhaust "
                    "the reserves defending a fixed rate; speculators attack before "
                    "reserves run out.",
        key_indicators=("Fiscal deficit / GDP ratio", "Foreign reserve levels",
                        "Money supply growth rate", "Current account balance"),
        historical_examples=("Mexico 1982", "Argentina 1890", "UK 1976", "Venezuela 2016"),
        warning_signals=("Persistent budget deficits above 5% of GDP", "Rapid reserve depletion",
                         "Central bank financing of government"),
    ),
    CrisisGenerationModel(
        generation="2nd",
        name="Self-Fulfilling Crisis Model",
        theorists=("Maurice Obstfeld", "Olivier Jeanne"),
        year=1994,
        mechanism="Multiple equilibria allow self-fulfilling speculative attacks even with "
                  "sound fundamentals, when policy trade-offs create vulnerability.",
        description="Countries with reasonable fundamentals can still face an attack if "
                    "expectations coordinate on one and defending the peg is costly.",
        key_indicators=("Unemployment rate", "Interest rate differentials",
                        "Political stability index", "Market sentiment indicators"),
        historical_examples=("UK 1992", "France 1992-1993", "Sweden 1992", "Denmark 1993"),
        warning_signals=("High unemployment creating political pressure",
                         "Rising interest rate defense costs",
                         "Speculative positioning in futures markets"),
    ),
    CrisisGenerationModel(
        generation="3rd",
        name="Balance Sheet Crisis Model",
        theorists=("Paul Krugman", "Roberto Chang", "Andres Velasco"),
        year=1999,
        mechanism="Currency and maturity mismatches on balance sheets create vulnerability "
                  "to capital flow reversals and twin banking-currency crises.",
        description="Depreciation devastates balance sheets that carry foreign-currency "
                    "debt; the credit crunch feeds back into the currency.",
        key_indicators=("Foreign currency debt / Total debt ratio",
                        "Short-term external debt / Reserves", "Banking sector leverage"),
        historical_examples=("Thailand 1997", "Korea 1997-1998", "Russia 1998",
                             "Argentina 2001-2002", "Iceland 2008"),
        warning_signals=("Rapid credit growth in foreign currency",
                         "Short-term debt exceeds reserves",
                         "Currency mismatch on corporate balance sheets"),
    ),
]


# ─── Country Debt Profiles ──────────────────────────────────────────────────

COUNTRY_DEBT_PROFILES: list[CountryDebtProfile] = [
    # Safe havens (reserve currency issuers)
    CountryDebtProfile("US", "United States", 5, 0, True, True, 123, 35, 0, 15),
    CountryDebtProfile("DE", "Germany", 10, 0, True, True, 66, 45, 0, 12),
    CountryDebtProfile("JP", "Japan", 15, 5, True, True, 263, 15, 5, 25),
    CountryDebtProfile("GB", "United Kingdom", 15, 5, True, True, 101, 40, 5, 20),
    CountryDebtProfile("CH", "Switzerland", 5, 0, True, False, 41, 50, 0, 8),

    # Emerging markets
    CountryDebtProfile("CN", "China", 35, 20, False, False, 77, 15, 15, 35),
    CountryDebtProfile("IN", "India", 40, 35, False, False, 83, 20, 50, 42),
    CountryDebtProfile("BR", "Brazil", 55, 45, False, False, 88, 25, 40, 55),
    CountryDebtProfile("MX", "Mexico", 50, 50, False, False, 57, 35, 55, 50),
    CountryDebtProfile("ZA", "South Africa", 55, 55, False, False, 72, 40, 45, 58),
    CountryDebtProfile("ID", "Indonesia", 45, 55, False, False, 40, 35, 55, 48),

    # Frontier / high vulnerability
    CountryDebtProfile("TR", "Turkey", 70, 70, False, False, 42, 55, 65, 72),
    CountryDebtProfile("AR", "Argentina", 90, 85, False, False, 85, 65, 80, 88),
    CountryDebtProfile("PK", "Pakistan", 80, 75, False, False, 78, 45, 70, 82),
    CountryDebtProfile("EG", "Egypt", 75, 70, False, False, 92, 35, 55, 75),
    CountryDebtProfile("LK", "Sri Lanka", 95, 80, False, False, 128, 55, 75, 95),
]


# ─── Capital Flow Episodes ──────────────────────────────────────────────────
# Sudden stops after Calvo (1998) and bonanzas after Reinhart-Reinhart (2008),
# plus safe-haven inflows. magnitude is net flow in % of GDP (negative = outflow).

CAPITAL_FLOW_EVENTS: list[CapitalFlowEvent] = [
    # Sudden stops
    CapitalFlowEvent(
        id="mexico-1982-stop", type="sudden_stop", country="Mexico", country_code="MX",
        year=1982, magnitude=-8.5,
        description="The original sudden stop behind the Latin American debt crisis. "
                    "Inflows reversed abruptly as US rates rose.",
        triggers=("US interest rate spike", "Oil price decline", "Debt servicing fears"),
        consequences=("Debt default", "Peso devaluation", "Banking crisis", "Lost decade begins"),
        related_crisis=CrisisId("latam-1982-debt"),
    ),
    CapitalFlowEvent(
        id="mexico-1994-stop", type="sudden_stop", country="Mexico", country_code="MX",
        year=1994, end_year=1995, magnitude=-7.2,
        description="$20bn left in weeks; the origin of the \"Tequila Effect\" contagion.",
        triggers=("Political instability", "Rising US rates", "Peso overvaluation",
                  "Reserve depletion"),
        consequences=("Tequila Crisis", "50% peso devaluation", "$50bn bailout", "Contagion to EM"),
        related_crisis=CrisisId("mexico-1994-currency"),
    ),
    CapitalFlowEvent(
        id="thailand-1997-stop", type="sudden_stop", country="Thailand", country_code="TH",
        year=1997, magnitude=-12.8,
        description="Triggered the Asian Financial Crisis as foreign investors fled "
                    "short-term positions.",
        triggers=("Property bubble burst", "Export slowdown", "Short-term debt exposure",
                  "Baht speculation"),
        consequences=("Baht float", "Banking collapse", "IMF bailout", "Regional contagion"),
        related_crisis=CrisisId("asia-1997-currency"),
    ),
    CapitalFlowEvent(
        id="korea-1997-stop", type="sudden_stop", country="South Korea", country_code="KR",
        year=1997, magnitude=-11.5,
        description="Short-term external debt ran at 3x reserves; banks refused to roll over.",
        triggers=("Asian contagion", "Chaebol debt", "Short-term bank borrowing",
                  "Reserve exhaustion"),
        consequences=("Won collapse", "IMF restructuring", "Corporate reforms",
                      "Banking consolidation"),
        related_crisis=CrisisId("asia-1997-currency"),
    ),
    CapitalFlowEvent(
        id="russia-1998-stop", type="sudden_stop", country="Russia", country_code="RU",
        year=1998, magnitude=-9.3,
        description="Asian contagion on top of domestic fiscal problems triggered capital flight.",
        triggers=("Asian contagion", "Oil price collapse", "GKO pyramid scheme",
                  "Political instability"),
        consequences=("Debt default", "Ruble devaluation", "LTCM collapse", "EM flight"),
        related_crisis=CrisisId("russia-1998-debt"),
    ),
    CapitalFlowEvent(
        id="argentina-2001-stop", type="sudden_stop", country="Argentina", country_code="AR",
        year=2001, magnitude=-15.2,
        description="One of the largest sudden stops on record; forced the end of the "
                    "currency board.",
        triggers=("Currency board rigidity", "Fiscal deficit", "Brazil devaluation",
                  "Global risk aversion"),
        consequences=("$93bn default", "Corralito", "Peso collapse", "Economic depression"),
        related_crisis=CrisisId("argentina-2001-debt"),
    ),
    CapitalFlowEvent(
        id="global-2008-stop", type="sudden_stop", country="Global (EM)", country_code="WORLD",
        year=2008, end_year=2009, magnitude=-6.8,
        description="Synchronized sudden stop across emerging markets; Fed swap lines "
                    "supplied dollar liquidity.",
        triggers=("Lehman collapse", "Global deleveraging", "Risk aversion spike", "Credit freeze"),
        consequences=("EM currency collapses", "Trade finance shortage",
                      "Coordinated intervention", "Fed swap lines"),
        related_crisis=CrisisId("us-2008-banking"),
    ),
    CapitalFlowEvent(
        id="turkey-2018-stop", type="sudden_stop", country="Turkey", country_code="TR",
        year=2018, magnitude=-5.4,
        description="Sudden stop driven by policy credibility loss and external pressure.",
        triggers=("Policy credibility loss", "High foreign currency debt", "US sanctions",
                  "Political interference"),
        consequences=("Lira crash", "Inflation surge", "Corporate distress", "Capital controls"),
        related_crisis=CrisisId("turkey-2018-currency"),
    ),

    # Capital bonanzas
    CapitalFlowEvent(
        id="latam-1990s-bonanza", type="capital_bonanza", country="Latin America",
        country_code="LATAM", year=1990, end_year=1994, magnitude=5.2,
        description="Post-restructuring inflows built the vulnerabilities exposed in the "
                    "Tequila Crisis.",
        triggers=("Brady Plan success", "Privatizations", "US low rates", "Washington Consensus"),
        consequences=("Asset price boom", "Currency appreciation", "Current account deficits",
                      "Set up for crisis"),
    ),
    CapitalFlowEvent(
        id="asia-1990s-bonanza", type="capital_bonanza", country="East Asia",
        country_code="ASIA", year=1990, end_year=1996, magnitude=7.8,
        description="East Asian Miracle inflows set up the 1997 crisis.",
        triggers=("High growth rates", "Financial liberalization", "Pegged currencies",
                  "Japanese investment"),
        consequences=("Credit boom", "Property bubble", "Currency appreciation",
                      "Building crisis vulnerabilities"),
    ),
    CapitalFlowEvent(
        id="em-2010s-bonanza", type="capital_bonanza", country="Emerging Markets",
        country_code="EM", year=2009, end_year=2013, magnitude=4.5,
        description="Post-GFC search for yield, reversed in the 2013 Taper Tantrum.",
        triggers=("QE in developed markets", "Zero interest rates", "Yield seeking",
                  "EM growth premium"),
        consequences=("EM currency appreciation", "Bond market boom", "Carry trade expansion",
                      "Taper tantrum setup"),
    ),

    # Flights to safety
    CapitalFlowEvent(
        id="gfc-2008-flight", type="flight_to_safety", country="United States",
        country_code="US", year=2008, magnitude=8.5,
        description="Although the US was the epicenter, the flight to safety drove the dollar up.",
        triggers=("Lehman collapse", "Global panic", "Deleveraging", "USD as safe haven"),
        consequences=("USD surge", "Treasury yields plunge", "EM capital outflows",
                      "Dollar shortage"),
    ),
    CapitalFlowEvent(
        id="euro-crisis-flight", type="flight_to_safety", country="Germany",
        country_code="DE", year=2011, end_year=2012, magnitude=6.2,
        description="Capital fled the Eurozone periphery for German Bunds.",
        triggers=("Eurozone debt crisis", "Greece concerns", "Euro breakup fears",
                  "Safe asset demand"),
        consequences=("Bund yields to 0%", "TARGET2 imbalances", "Peripheral spreads spike",
                      "ECB intervention"),
    ),
    CapitalFlowEvent(
        id="covid-2020-flight", type="flight_to_safety", country="United States",
        country_code="US", year=2020, magnitude=7.1,
        description="Fastest flight to safety on record; Fed swap lines extended to 14 "
                    "central banks.",
        triggers=("COVID-19 pandemic", "Global lockdowns", "Risk asset collapse",
                  "Liquidity crisis"),
        consequences=("USD spike", "Treasury rally", "EM outflows", "Fed swap lines activated"),
    ),
]
