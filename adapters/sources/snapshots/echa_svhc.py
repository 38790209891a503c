"""
ECHA SVHC Candidate List snapshot (February 2026 selection).

Source: https://echa.europa.eu/candidate-list-table. ECHA adds substances
twice a year (January and June); refresh this table after each inclusion
batch. Rows are (substance name, CAS number, reason for inclusion).
"""

REGULATION = "REACH Candidate List (SVHC)"

ROWS = (
    ("Bis(2-ethylhexyl) phthalate (DEHP)", "117-81-7", "Toxic for reproduction (Article 57c)"),
    ("Dibutyl phthalate (DBP)", "84-74-2", "Toxic for reproduction (Article 57c)"),
    ("Benzyl butyl phthalate (BBP)", "85-68-7", "Toxic for reproduction (Article 57c)"),
    ("Diisobutyl phthalate (DIBP)", "84-69-5", "Toxic for reproduction (Article 57c)"),
    ("Lead", "7439-92-1", "Toxic for reproduction (Article 57c)"),
    ("Lead monoxide (litharge)", "1317-36-8", "Toxic for reproduction (Article 57c)"),
    ("Trilead bis(orthophosphate)", "7446-27-7", "Toxic for reproduction (Article 57c)"),
    ("Hexabromocyclododecane (HBCDD)", "25637-99-4", "PBT (Article 57d)"),
    ("Bis(tributyltin) oxide (TBTO)", "56-35-9", "PBT (Article 57d)"),
    ("Anthracene", "120-12-7", "PBT (Article 57d)"),
    ("4,4'-Diaminodiphenylmethane (MDA)", "101-77-9", "Carcinogenic (Article 57a)"),
    ("Diarsenic pentaoxide", "1303-28-2", "Carcinogenic (Article 57a)"),
    ("Diarsenic trioxide", "1327-53-3", "Carcinogenic (Article 57a)"),
    ("Cobalt(II) dichloride", "7646-79-9", "Carcinogenic (Article 57a)"),
    ("Cobalt(II) sulphate", "10124-43-3", "Carcinogenic (Article 57a)"),
    ("Cobalt(II) dinitrate", "10141-05-6", "Carcinogenic (Article 57a)"),
    ("Cobalt(II) carbonate", "513-79-1", "Carcinogenic (Article 57a)"),
    ("Cobalt(II) diacetate", "71-48-7", "Carcinogenic (Article 57a)"),
    ("Chromium trioxide", "1333-82-0", "Carcinogenic (Article 57a), mutagenic (Article 57b)"),
    ("Sodium dichromate", "10588-01-9", "Carcinogenic (Article 57a), mutagenic (Article 57b), toxic for reproduction (Article 57c)"),
    ("Potassium dichromate", "7778-50-9", "Carcinogenic (Article 57a), mutagenic (Article 57b), toxic for reproduction (Article 57c)"),
    ("Ammonium dichromate", "7789-09-5", "Carcinogenic (Article 57a), mutagenic (Article 57b)"),
    ("Strontium chromate", "7789-06-2", "Carcinogenic (Article 57a)"),
    ("Trichloroethylene", "79-01-6", "Carcinogenic (Article 57a)"),
    ("Acrylamide", "79-06-1", "Carcinogenic (Article 57a), mutagenic (Article 57b)"),
    ("Boric acid", "10043-35-3", "Toxic for reproduction (Article 57c)"),
    ("Disodium tetraborate, anhydrous (borax)", "1303-96-4", "Toxic for reproduction (Article 57c)"),
    ("2-Ethoxyethanol", "110-80-5", "Toxic for reproduction (Article 57c)"),
    ("2-Methoxyethanol", "109-86-4", "Toxic for reproduction (Article 57c)"),
    ("N,N-Dimethylformamide (DMF)", "68-12-2", "Toxic for reproduction (Article 57c)"),
    ("Tris(2-chloroethyl) phosphate (TCEP)", "115-96-8", "Toxic for reproduction (Article 57c)"),
    ("Dihexyl phthalate", "84-75-3", "Toxic for reproduction (Article 57c)"),
    ("Bisphenol A (BPA)", "80-05-7", "Toxic for reproduction (Article 57c), endocrine disrupting properties (Article 57f)"),
    ("4-tert-Octylphenol", "140-66-9", "Endocrine disrupting properties (Article 57f)"),
    ("4-Nonylphenol, branched and linear", None, "Endocrine disrupting properties (Article 57f)"),
    ("Perfluorooctanoic acid (PFOA)", "335-67-1", "PBT (Article 57d), endocrine disrupting properties (Article 57f)"),
    ("Perfluorooctane sulphonic acid (PFOS)", "1763-23-1", "PBT (Article 57d), vPvB (Article 57e)"),
    ("Perfluorohexane-1-sulphonic acid (PFHxS)", "355-46-4", "vPvB (Article 57e), PBT (Article 57d)"),
    ("Musk xylene", "81-15-2", "vPvB (Article 57e)"),
    ("Cadmium", "7440-43-9", "Carcinogenic (Article 57a)"),
    ("Cadmium oxide", "1306-19-0", "Carcinogenic (Article 57a)"),
    ("Cadmium sulphide", "1306-23-6", "Carcinogenic (Article 57a)"),
    ("Cadmium chloride", "10108-64-2", "Carcinogenic (Article 57a), mutagenic (Article 57b), toxic for reproduction (Article 57c)"),
    ("Dichromium tris(chromate)", "24613-89-6", "Carcinogenic (Article 57a)"),
    ("Dimethyl sulphate", "77-78-1", "Carcinogenic (Article 57a)"),
    ("Diboron trioxide", "1303-86-2", "Toxic for reproduction (Article 57c)"),
    ("Diisopentyl phthalate", "605-50-5", "Toxic for reproduction (Article 57c)"),
    ("1,2-Dichloroethane", "107-06-2", "Carcinogenic (Article 57a)"),
    ("Bis(pentabromophenyl) ether (DecaBDE)", "1163-19-5", "vPvB (Article 57e)"),
    ("Lead chromate", "7758-97-6", "Carcinogenic (Article 57a), toxic for reproduction (Article 57c)"),
    ("Lead sulfochromate yellow (C.I. Pigment Yellow 34)", "1344-37-2", "Carcinogenic (Article 57a), toxic for reproduction (Article 57c)"),
    ("Phenolphthalein", "77-09-8", "Carcinogenic (Article 57a)"),
    ("4,4'-Methylenediphenyl diisocyanate (MDI)", "101-68-8", "Respiratory sensitisation (Article 57f)"),
)
