"""
Curated EU Cosmetics Regulation (EC) 1223/2009 entries.

EUR-Lex has no machine-readable substance list; names live in Annexes II
(prohibited), III (restricted) and VI (UV filters) and their amending
regulations. Refresh after each Official Journal amendment.
"""

CELEX_BASE = "https://eur-lex.europa.eu/legal-content/EN/TXT/?uri=CELEX:"

ROWS = (
    # Recent prohibitions via amendments
    {
        "name": "Lilial",
        "cas_number": "80-54-6",
        "reason": "Prohibited in all cosmetic products (CMR category 1B, reproductive toxicity). "
        "INCI: Butylphenyl Methylpropional. Deadline: March 2022.",
        "regulation": "Regulation (EU) 2021/1099: Cosmetics Regulation Annex II",
        "celex": "32021R1099",
    },
    {
        "name": "Butylphenyl methylpropional",
        "cas_number": "80-54-6",
        "reason": "Prohibited in all cosmetic products (CMR category 1B, reproductive toxicity). "
        "Also known as Lilial.",
        "regulation": "Regulation (EU) 2021/1099: Cosmetics Regulation Annex II",
        "celex": "32021R1099",
    },
    {
        "name": "HICC",
        "cas_number": "31906-04-4",
        "reason": "Hydroxyisohexyl 3-cyclohexene carboxaldehyde, prohibited fragrance allergen "
        "(strong skin sensitiser, Annex II entry).",
        "regulation": "Regulation (EU) 2019/1966: Cosmetics Regulation Annex II",
        "celex": "32019R1966",
    },
    {
        "name": "Hydroxyisohexyl 3-cyclohexene carboxaldehyde",
        "cas_number": "31906-04-4",
        "reason": "Prohibited fragrance allergen. Strong skin sensitiser. Also known as HICC.",
        "regulation": "Regulation (EU) 2019/1966: Cosmetics Regulation Annex II",
        "celex": "32019R1966",
    },
    {
        "name": "Atranol",
        "cas_number": "526-37-4",
        "reason": "Prohibited fragrance ingredient, strong contact allergen derived from "
        "oakmoss/treemoss extracts.",
        "regulation": "Regulation (EU) 2019/1966: Cosmetics Regulation Annex II",
        "celex": "32019R1966",
    },
    {
        "name": "Chloroatranol",
        "cas_number": "57074-21-2",
        "reason": "Prohibited fragrance ingredient, potent contact allergen from "
        "oakmoss/treemoss extracts.",
        "regulation": "Regulation (EU) 2019/1966: Cosmetics Regulation Annex II",
        "celex": "32019R1966",
    },
    {
        "name": "Kojic acid",
        "cas_number": "501-30-4",
        "reason": "Restricted skin-brightening agent: max 1% in face care products, "
        "max 0.5% in hand care leave-on products.",
        "regulation": "Regulation (EU) 2022/1531: Cosmetics Regulation Annex III",
        "celex": "32022R1531",
    },
    {
        "name": "Titanium dioxide",
        "cas_number": "13463-67-7",
        "reason": "Prohibited in aerosol/spray cosmetic products where particles could be "
        "inhaled (possible carcinogen by inhalation).",
        "regulation": "Regulation (EU) 2021/850: Cosmetics Regulation Annex II",
        "celex": "32021R0850",
    },
    {
        "name": "Phenoxyethanol",
        "cas_number": "122-99-6",
        "reason": "Restricted: maximum 0.4% in nappy creams and body lotions/milks for "
        "children under 3 years.",
        "regulation": "Regulation (EU) 2021/1902: Cosmetics Regulation Annex III",
        "celex": "32021R1902",
    },
    # Annex III restricted substances
    {
        "name": "Formaldehyde",
        "cas_number": "50-00-0",
        "reason": "Restricted preservative: max 0.2% in non-oral products, max 0.1% in oral "
        "hygiene products; prohibited in aerosol applications.",
        "regulation": "Regulation (EC) 1223/2009: Annex III, entry 5",
        "celex": "32009R1223",
    },
    {
        "name": "Resorcinol",
        "cas_number": "108-46-3",
        "reason": "Restricted: max 0.5% in hair dye products only. Prohibited in other cosmetics.",
        "regulation": "Regulation (EC) 1223/2009: Annex III, entry 35",
        "celex": "32009R1223",
    },
    {
        "name": "Hydroquinone",
        "cas_number": "123-31-9",
        "reason": "Restricted to professional use in oxidative hair colouring products. "
        "Prohibited in other cosmetics.",
        "regulation": "Regulation (EC) 1223/2009: Annex III, entry 14",
        "celex": "32009R1223",
    },
    {
        "name": "Toluene",
        "cas_number": "108-88-3",
        "reason": "Restricted to nail products only (max 25%). CMR category 2 "
        "(reproductive toxicity).",
        "regulation": "Regulation (EC) 1223/2009: Annex III, entry 105",
        "celex": "32009R1223",
    },
    {
        "name": "Methylisothiazolinone",
        "cas_number": "2682-20-4",
        "reason": "Prohibited in leave-on products. Restricted in rinse-off products "
        "(max 0.0015%). Potent contact allergen.",
        "regulation": "Regulation (EU) 2017/1224: Cosmetics Regulation Annex III",
        "celex": "32017R1224",
    },
    {
        "name": "Triclosan",
        "cas_number": "3380-34-5",
        "reason": "Restricted biocidal preservative, max 0.3% in a closed list of product "
        "types. Endocrine-disrupting concern.",
        "regulation": "Regulation (EU) 2014/358: Cosmetics Regulation Annex III",
        "celex": "32014R0358",
    },
    # Annex VI restricted UV filters
    {
        "name": "Oxybenzone",
        "cas_number": "131-57-7",
        "reason": "Benzophenone-3, restricted UV filter: max 6% in face products, max 0.5% "
        "in other body lotions.",
        "regulation": "Regulation (EC) 1223/2009: Annex VI, entry 4",
        "celex": "32009R1223",
    },
    {
        "name": "Benzophenone-3",
        "cas_number": "131-57-7",
        "reason": "Restricted UV filter: max 6% in face products, max 0.5% in other body "
        "lotions. Also known as Oxybenzone.",
        "regulation": "Regulation (EC) 1223/2009: Annex VI, entry 4",
        "celex": "32009R1223",
    },
    {
        "name": "Octinoxate",
        "cas_number": "5466-77-3",
        "reason": "Ethylhexyl methoxycinnamate, restricted UV filter, max 7.5% in cosmetics.",
        "regulation": "Regulation (EC) 1223/2009: Annex VI, entry 13",
        "celex": "32009R1223",
    },
    {
        "name": "Ethylhexyl methoxycinnamate",
        "cas_number": "5466-77-3",
        "reason": "Restricted UV filter, max 7.5% in cosmetics. Also known as Octinoxate.",
        "regulation": "Regulation (EC) 1223/2009: Annex VI, entry 13",
        "celex": "32009R1223",
    },
)
