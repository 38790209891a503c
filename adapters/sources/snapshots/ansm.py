"""
ANSM cosmetics safety alerts (2021-2025 selection).

The ANSM site renders search results client-side, so the live scrape rarely
yields anything; this table is what the checks normally run on. Add a row
whenever ANSM publishes a new cosmetics alert.
"""

ANSM_BASE = "https://ansm.sante.fr"

ROWS = (
    {
        "name": "Hydroquinone",
        "cas_number": "123-31-9",
        "reason": "Found in illegal skin-lightening products sold online. Prohibited in "
        "cosmetics available to the general public in France.",
        "regulation": "ANSM: Décision de police sanitaire (cosmétiques éclaircissants)",
        "query": "hydroquinone",
    },
    {
        "name": "Mercury",
        "cas_number": "7439-97-6",
        "reason": "Skin-lightening creams seized with up to 33 000 ppm mercury. Prohibited "
        "in all cosmetics above 1 ppm.",
        "regulation": "ANSM: Rappel de produits cosmétiques contenant du mercure",
        "query": "mercure",
    },
    {
        "name": "Formaldehyde",
        "cas_number": "50-00-0",
        "reason": "Keratin hair-straightening products releasing formaldehyde above legal "
        "limits during use.",
        "regulation": "ANSM: Alerte sur les lissages kératine au formaldéhyde",
        "query": "formaldehyde",
    },
    {
        "name": "Toluene",
        "cas_number": "108-88-3",
        "reason": "Nail products containing toluene above the permitted maximum of 25%.",
        "regulation": "ANSM: Alerte vernis à ongles (toluène)",
        "query": "tolu%C3%A8ne",
    },
    {
        "name": "Resorcinol",
        "cas_number": "108-46-3",
        "reason": "Contact allergy cases in hair dye users. Restricted to max 0.5% in "
        "oxidative hair dye products.",
        "regulation": "ANSM: Surveillance colorants capillaires (résorcinol)",
        "query": "r%C3%A9sorcinol",
    },
    {
        "name": "Methylisothiazolinone",
        "cas_number": "2682-20-4",
        "reason": "Strong sensitiser; prohibited in leave-on products since 2017, ongoing "
        "pharmacovigilance for rinse-off cosmetics.",
        "regulation": "ANSM: Alerte MIT/CMIT conservateurs (allergie de contact)",
        "query": "methylisothiazolinone",
    },
    {
        "name": "Titanium dioxide",
        "cas_number": "13463-67-7",
        "reason": "Inhalation risk of nanoparticles in spray and powder cosmetics "
        "(IARC Group 2B by inhalation).",
        "regulation": "ANSM: Avis sur le dioxyde de titane dans les aérosols cosmétiques",
        "query": "dioxyde+de+titane",
    },
    {
        "name": "Kojic acid",
        "cas_number": "501-30-4",
        "reason": "Skin-brightening products exceeding the limits of Regulation (EU) 2022/1531.",
        "regulation": "ANSM: Surveillance acide kojique dans les cosmétiques éclaircissants",
        "query": "acide+kojique",
    },
    {
        "name": "Diethylene glycol",
        "cas_number": "111-46-6",
        "reason": "Cosmetics recalled for diethylene glycol contamination, a nephrotoxic "
        "substance prohibited in cosmetics.",
        "regulation": "ANSM: Rappel produits cosmétiques (contamination diéthylène glycol)",
        "query": "di%C3%A9thyl%C3%A8ne+glycol",
    },
    {
        "name": "Lead acetate",
        "cas_number": "301-04-2",
        "reason": "Found in progressive hair-colouring products. Prohibited in all "
        "cosmetics in the EU since 2018.",
        "regulation": "ANSM: Décision interdiction acétate de plomb dans les cosmétiques",
        "query": "ac%C3%A9tate+de+plomb",
    },
)
