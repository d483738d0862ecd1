"""Static requirement catalog: what each department must supply to finish work.

FULL_SCHEMAS covers every department. REDUCED_SCHEMAS holds explicit reduced
forms used while a department is disabled (currently only 3D printing, whose
in-house form is not yet available and falls back to an outsourcing form).
"""

from goldworks.domain.enums import DepartmentKey, FieldType
from goldworks.domain.value_objects.core import (
    FileRequirement,
    FormField,
    PhotoRequirement,
    RequirementSchema,
)

# Identifiers used by existing clients for flags and work instructions.
CONFIG_IDS: dict[DepartmentKey, str] = {
    DepartmentKey.CAD: "CAD_DESIGN",
    DepartmentKey.PRINT: "3D_PRINTING",
    DepartmentKey.CASTING: "CASTING",
    DepartmentKey.FILLING: "FILLING_SHAPING",
    DepartmentKey.MEENA: "MEENA_WORK",
    DepartmentKey.POLISH_1: "PRIMARY_POLISH",
    DepartmentKey.SETTING: "STONE_SETTING",
    DepartmentKey.POLISH_2: "FINAL_POLISH",
    DepartmentKey.ADDITIONAL: "FINISHING_TOUCH",
}

CAD_FORMATS = (
    ".3dm", ".stl", ".obj", ".step", ".stp", ".iges", ".igs", ".dwg", ".dwf",
    ".dxf", ".fbx", ".3ds", ".blend", ".ply", ".dae", ".glb", ".gltf", ".x3d",
    ".wrl", ".amf", ".3mf", ".ipt", ".iam", ".prt", ".asm", ".sldprt", ".sldasm",
)

_CAD = RequirementSchema(
    department=DepartmentKey.CAD,
    title="CAD Design Studio",
    description="Create 3D digital models and technical drawings for jewelry pieces",
    estimated_time="3-5 hours",
    required_tools=("CAD Software (Rhino/Matrix)", "3D Mouse", "Reference Materials"),
    form_fields=(
        FormField(
            name="designSoftware",
            label="CAD Software Used",
            type=FieldType.SELECT,
            required=True,
            options=("Rhino 3D", "Matrix", "JewelCAD", "Blender", "Other"),
            help_text="Select the primary software used for this design",
        ),
        FormField(
            name="modelWeight",
            label="Estimated Model Weight (grams)",
            type=FieldType.NUMBER,
            required=True,
            min_value=0.1,
            max_value=1000,
            placeholder="e.g., 25.5",
            help_text="Estimated weight of the final piece in grams",
        ),
        FormField(
            name="dimensions",
            label="Dimensions (L x W x H in mm)",
            type=FieldType.TEXT,
            required=True,
            placeholder="e.g., 20 x 15 x 8",
        ),
        FormField(
            name="stoneSettings",
            label="Number of Stone Settings",
            type=FieldType.NUMBER,
            min_value=0,
            max_value=500,
            placeholder="e.g., 12",
        ),
        FormField(
            name="designNotes",
            label="Design Notes",
            type=FieldType.TEXTAREA,
            required=True,
            min_length=20,
            max_length=1000,
            help_text="Important details about the design for the next department",
        ),
        FormField(
            name="clientApproved",
            label="Client Design Approval Received",
            type=FieldType.CHECKBOX,
            required=True,
        ),
    ),
    photo_requirements=(
        PhotoRequirement(
            "topView", "Top View Render", "3D render showing top view of the design",
            required=True, min_count=1, max_count=1,
        ),
        PhotoRequirement(
            "sideView", "Side View Render", "3D render showing side profile",
            required=True, min_count=1, max_count=1,
        ),
        PhotoRequirement(
            "perspectiveView", "Perspective View Render",
            "3D render showing perspective/3D view",
            required=True, min_count=1, max_count=1,
        ),
        PhotoRequirement(
            "detailViews", "Detail Views (Optional)",
            "Close-up renders of intricate details or stone settings",
            required=False, min_count=0, max_count=5,
        ),
    ),
    file_requirements=(
        FileRequirement(
            "cadFile", "CAD Model File",
            "Original CAD file (.3dm, .stl, .obj, or other CAD formats)",
            required=True, accepted_formats=CAD_FORMATS, max_size_mb=50,
        ),
        FileRequirement(
            "technicalDrawing", "Technical Drawing (PDF)",
            "Detailed technical drawing with dimensions",
            required=False, accepted_formats=(".pdf",), max_size_mb=10,
        ),
    ),
    tips=(
        "Ensure all dimensions match customer specifications exactly",
        "Check for printability - avoid thin walls below 0.6mm",
        "Verify stone setting sizes match actual stone dimensions",
        "Include all design notes that affect manufacturing",
    ),
    common_mistakes=(
        "Not checking for overlapping surfaces",
        "Stone settings too small or too large",
        "Missing client approval before proceeding",
    ),
)

_PRINT = RequirementSchema(
    department=DepartmentKey.PRINT,
    title="3D Printing Lab",
    description="Print castable resin models from the approved CAD design",
    estimated_time="4-8 hours",
    required_tools=("Resin Printer", "Castable Resin", "IPA Wash Station", "UV Cure Box"),
    form_fields=(
        FormField(
            name="printerModel",
            label="Printer Used",
            type=FieldType.SELECT,
            required=True,
            options=("Formlabs Form 3", "Asiga MAX", "Phrozen Sonic", "EnvisionTEC", "Other"),
        ),
        FormField(
            name="resinType",
            label="Resin Type",
            type=FieldType.SELECT,
            required=True,
            options=("Castable Wax Resin", "Castable Resin", "Standard Resin"),
        ),
        FormField(
            name="layerHeight",
            label="Layer Height (mm)",
            type=FieldType.NUMBER,
            required=True,
            min_value=0.01,
            max_value=0.2,
            placeholder="e.g., 0.025",
        ),
        FormField(
            name="printDuration",
            label="Print Duration (hours)",
            type=FieldType.NUMBER,
            required=True,
            min_value=0.5,
            max_value=48,
        ),
        FormField(
            name="supportRemoval",
            label="Supports Removed and Model Cured",
            type=FieldType.CHECKBOX,
            required=True,
        ),
        FormField(
            name="printNotes",
            label="Print Notes",
            type=FieldType.TEXTAREA,
            max_length=500,
        ),
    ),
    photo_requirements=(
        PhotoRequirement(
            "printedModel", "Printed Model", "Photos of the cured model before casting",
            required=True, min_count=2, max_count=4,
        ),
    ),
    tips=(
        "Orient the model to keep supports away from visible surfaces",
        "Cure castable resin fully before investing",
    ),
    common_mistakes=("Leaving support marks on detailed areas",),
)

_PRINT_OUTSOURCED = RequirementSchema(
    department=DepartmentKey.PRINT,
    title="3D Printing Lab",
    description="Outsource 3D printing to external printing company",
    estimated_time="1-2 days (outsourced)",
    coming_soon_message=(
        "Advanced in-house 3D printing features (printer settings, materials, etc.) "
        "are coming soon. Currently using simplified outsourcing workflow."
    ),
    form_fields=(
        FormField(
            name="outsourcedCompany",
            label="Printing Company Name",
            type=FieldType.TEXT,
            required=True,
            placeholder="Enter the name of the printing company",
            help_text="Name of the external company handling the 3D printing",
        ),
        FormField(
            name="receivedWeight",
            label="Received Model Weight (grams)",
            type=FieldType.NUMBER,
            required=True,
            min_value=0.1,
            max_value=1000,
            placeholder="e.g., 25.5",
            help_text="Weight of the printed model after receiving from vendor",
        ),
    ),
    photo_requirements=(
        PhotoRequirement(
            "receivedModel", "Received Printed Model",
            "Photos of the printed model received from the vendor",
            required=True, min_count=2, max_count=2,
        ),
    ),
    tips=(
        "Check the received model for any defects or damage",
        "Weigh the model accurately upon receipt",
        "Communicate any quality issues to the vendor immediately",
    ),
    common_mistakes=(
        "Not inspecting the model thoroughly upon receipt",
        "Forgetting to document the vendor name",
        "Accepting damaged or defective prints",
    ),
)

_CASTING = RequirementSchema(
    department=DepartmentKey.CASTING,
    title="Casting Workshop",
    description="Cast the design in precious metal using lost-wax casting process",
    estimated_time="6-10 hours (including burnout)",
    required_tools=("Casting Machine", "Investment Plaster", "Furnace", "Crucible"),
    form_fields=(
        FormField(
            name="metalType",
            label="Metal Type",
            type=FieldType.SELECT,
            required=True,
            options=("22K Gold", "18K Gold", "14K Gold", "Silver 925", "Platinum", "Other"),
        ),
        FormField(
            name="metalWeight",
            label="Metal Weight Used (grams)",
            type=FieldType.NUMBER,
            required=True,
            min_value=0.1,
            max_value=500,
            placeholder="e.g., 28.5",
        ),
        FormField(
            name="castingMethod",
            label="Casting Method",
            type=FieldType.SELECT,
            required=True,
            options=("Centrifugal", "Vacuum", "Pressure", "Gravity"),
        ),
        FormField(
            name="flaskSize",
            label="Flask Size",
            type=FieldType.TEXT,
            required=True,
            placeholder='e.g., 3" or Medium',
        ),
        FormField(
            name="burnoutTemp",
            label="Burnout Temperature (°C)",
            type=FieldType.NUMBER,
            min_value=400,
            max_value=800,
        ),
        FormField(
            name="burnoutTime",
            label="Burnout Time (hours)",
            type=FieldType.NUMBER,
            min_value=4,
            max_value=24,
        ),
        FormField(
            name="castingTemp",
            label="Casting Temperature (°C)",
            type=FieldType.NUMBER,
            min_value=800,
            max_value=1200,
        ),
        FormField(
            name="castingNotes",
            label="Casting Notes",
            type=FieldType.TEXTAREA,
            max_length=500,
        ),
        FormField(
            name="castingSuccess",
            label="Casting Successful (No Porosity/Defects)",
            type=FieldType.CHECKBOX,
            required=True,
        ),
    ),
    photo_requirements=(
        PhotoRequirement(
            "castedPiece", "Casted Piece", "Photos of the piece after casting and cleaning",
            required=True, min_count=2, max_count=4,
        ),
        PhotoRequirement(
            "sprueAttachment", "Sprue Attachment Point",
            "Photo showing where sprue was attached (before cutting)",
            required=False, min_count=0, max_count=2,
        ),
    ),
    tips=(
        "Weigh metal precisely to avoid waste",
        "Allow sufficient burnout time to avoid carbon residue",
        "Inspect for porosity immediately after quenching",
    ),
    common_mistakes=(
        "Insufficient burnout time causing carbon inclusion",
        "Incorrect metal temperature leading to incomplete fills",
        "Quenching too quickly causing cracks",
    ),
)

_FILLING = RequirementSchema(
    department=DepartmentKey.FILLING,
    title="Filling & Shaping",
    description="Remove casting imperfections and shape the piece to design specifications",
    estimated_time="3-6 hours",
    required_tools=("Files", "Burrs", "Sandpaper", "Polishing Motor", "Calipers"),
    form_fields=(
        FormField(
            name="sprueRemoval",
            label="Sprue Removal Method",
            type=FieldType.SELECT,
            required=True,
            options=("Saw", "File", "Grinding Wheel", "Laser Cut"),
        ),
        FormField(
            name="surfaceFinish",
            label="Surface Finish Achieved",
            type=FieldType.SELECT,
            required=True,
            options=("Rough Filed", "Medium Finish", "Smooth Finish", "Pre-polish"),
        ),
        FormField(
            name="dimensionCheck",
            label="Dimensions Verified",
            type=FieldType.CHECKBOX,
            required=True,
            help_text="Confirmed dimensions match CAD specifications",
        ),
        FormField(
            name="weightAfterFiling",
            label="Weight After Filing (grams)",
            type=FieldType.NUMBER,
            required=True,
            min_value=0.1,
            max_value=500,
        ),
        FormField(
            name="defectsFound",
            label="Defects Found",
            type=FieldType.SELECT,
            required=True,
            options=("None", "Minor Porosity", "Surface Scratches", "Shape Issues", "Other"),
        ),
        FormField(
            name="defectsResolution",
            label="Defects Resolution",
            type=FieldType.TEXTAREA,
            max_length=500,
        ),
        FormField(
            name="workNotes",
            label="Work Notes",
            type=FieldType.TEXTAREA,
            required=True,
            min_length=20,
            max_length=500,
        ),
    ),
    photo_requirements=(
        PhotoRequirement(
            "afterFiling", "After Filing Photos",
            "Photos showing the piece after filing and shaping",
            required=True, min_count=2, max_count=4,
        ),
        PhotoRequirement(
            "defectPhotos", "Defect Photos (If Any)",
            "Photos of any defects found during filing",
            required=False, min_count=0, max_count=3,
        ),
    ),
    tips=(
        "Use coarse files first, then progress to finer grits",
        "Check dimensions frequently during filing",
    ),
    common_mistakes=(
        "Filing too aggressively and removing too much material",
        "Not removing all sprue marks completely",
    ),
)

_MEENA = RequirementSchema(
    department=DepartmentKey.MEENA,
    title="Meena Artistry",
    description="Apply traditional Meenakari (enamel) work on jewelry pieces",
    estimated_time="8-12 hours",
    required_tools=("Enamel Powder", "Kiln", "Fine Brushes", "Spatula", "Grinding Tools"),
    form_fields=(
        FormField(
            name="enamelColors",
            label="Enamel Colors Used",
            type=FieldType.TEXTAREA,
            required=True,
            min_length=10,
            max_length=300,
        ),
        FormField(
            name="designPattern",
            label="Design Pattern",
            type=FieldType.SELECT,
            required=True,
            options=("Floral", "Geometric", "Traditional", "Modern", "Custom"),
        ),
        FormField(
            name="layersApplied",
            label="Number of Enamel Layers",
            type=FieldType.NUMBER,
            required=True,
            min_value=1,
            max_value=10,
        ),
        FormField(
            name="firingTemp",
            label="Firing Temperature (°C)",
            type=FieldType.NUMBER,
            required=True,
            min_value=700,
            max_value=900,
        ),
        FormField(
            name="firingTime",
            label="Firing Time per Layer (minutes)",
            type=FieldType.NUMBER,
            required=True,
            min_value=1,
            max_value=30,
        ),
        FormField(
            name="meenaQuality",
            label="Meena Quality Check",
            type=FieldType.SELECT,
            required=True,
            options=("Excellent", "Good", "Acceptable", "Needs Rework"),
        ),
        FormField(
            name="artisanNotes",
            label="Artisan Notes",
            type=FieldType.TEXTAREA,
            required=True,
            min_length=30,
            max_length=600,
        ),
    ),
    photo_requirements=(
        PhotoRequirement(
            "meenaComplete", "Completed Meena Work",
            "Photos of the finished enamel work from multiple angles",
            required=True, min_count=3, max_count=6,
        ),
        PhotoRequirement(
            "closeupDetails", "Close-up Details",
            "Macro photos showing enamel detail and quality",
            required=True, min_count=2, max_count=4,
        ),
        PhotoRequirement(
            "progressPhotos", "Progress Photos (Optional)",
            "Photos showing stages of enamel application",
            required=False, min_count=0, max_count=5,
        ),
    ),
    tips=(
        "Clean metal surface thoroughly before applying enamel",
        "Apply thin, even layers for best results",
        "Allow piece to cool completely between firings",
    ),
    common_mistakes=(
        "Applying enamel too thickly causing bubbles",
        "Over-firing causing color changes",
    ),
)

_POLISH_1 = RequirementSchema(
    department=DepartmentKey.POLISH_1,
    title="Primary Polish",
    description="Initial polishing to remove scratches and achieve base shine",
    estimated_time="2-4 hours",
    required_tools=("Polishing Motor", "Compound Buffs", "Tripoli", "Rouge", "Ultrasonic Cleaner"),
    form_fields=(
        FormField(
            name="polishingStages",
            label="Polishing Stages Completed",
            type=FieldType.SELECT,
            required=True,
            options=(
                "Tripoli Only",
                "Tripoli + White Diamond",
                "Tripoli + Rouge",
                "Full 3-Stage",
            ),
        ),
        FormField(
            name="buffSpeed",
            label="Buff Speed (RPM)",
            type=FieldType.SELECT,
            required=True,
            options=("Low (1500 RPM)", "Medium (3000 RPM)", "High (5000 RPM)"),
        ),
        FormField(
            name="timeSpent",
            label="Time Spent (minutes)",
            type=FieldType.NUMBER,
            required=True,
            min_value=10,
            max_value=500,
        ),
        FormField(
            name="surfaceQuality",
            label="Surface Quality After Polish",
            type=FieldType.SELECT,
            required=True,
            options=("Mirror Finish", "High Shine", "Medium Shine", "Matte", "Brushed"),
        ),
        FormField(
            name="scratches",
            label="Remaining Scratches",
            type=FieldType.SELECT,
            required=True,
            options=("None", "Minor", "Moderate", "Significant"),
        ),
        FormField(
            name="ultrasonicCleaning",
            label="Ultrasonic Cleaning Done",
            type=FieldType.CHECKBOX,
            required=True,
        ),
        FormField(
            name="polishNotes",
            label="Polish Notes",
            type=FieldType.TEXTAREA,
            required=True,
            min_length=20,
            max_length=500,
        ),
    ),
    photo_requirements=(
        PhotoRequirement(
            "afterPolish", "After Primary Polish", "Photos showing the polished piece",
            required=True, min_count=2, max_count=4,
        ),
        PhotoRequirement(
            "surfaceDetail", "Surface Detail",
            "Close-up showing polish quality and surface finish",
            required=True, min_count=1, max_count=2,
        ),
    ),
    tips=(
        "Start with coarse compound and work to fine",
        "Clean thoroughly between compound changes",
    ),
    common_mistakes=(
        "Using too much pressure causing heat damage",
        "Over-polishing edges making them too rounded",
    ),
)

_SETTING = RequirementSchema(
    department=DepartmentKey.SETTING,
    title="Stone Setting",
    description="Set precious and semi-precious stones securely in the jewelry piece",
    estimated_time="3-8 hours (depending on stone count)",
    required_tools=("Setting Burrs", "Prong Pushers", "Stone Setter", "Loupe", "Tweezers"),
    form_fields=(
        FormField(
            name="stoneCount",
            label="Total Number of Stones Set",
            type=FieldType.NUMBER,
            required=True,
            min_value=0,
            max_value=500,
        ),
        FormField(
            name="stoneTypes",
            label="Stone Types Used",
            type=FieldType.TEXTAREA,
            required=True,
            min_length=10,
            max_length=500,
        ),
        FormField(
            name="settingStyle",
            label="Setting Style",
            type=FieldType.SELECT,
            required=True,
            options=("Prong", "Bezel", "Channel", "Pave", "Flush", "Mixed"),
        ),
        FormField(
            name="settingQuality",
            label="Setting Quality",
            type=FieldType.SELECT,
            required=True,
            options=("Excellent", "Good", "Acceptable", "Needs Review"),
        ),
        FormField(
            name="stoneAlignment",
            label="Stone Alignment Check",
            type=FieldType.CHECKBOX,
            required=True,
            help_text="All stones properly aligned and level",
        ),
        FormField(
            name="securityCheck",
            label="Security Check",
            type=FieldType.CHECKBOX,
            required=True,
            help_text="All stones securely set (wiggle test passed)",
        ),
        FormField(
            name="settingNotes",
            label="Setting Notes",
            type=FieldType.TEXTAREA,
            required=True,
            min_length=20,
            max_length=600,
        ),
    ),
    photo_requirements=(
        PhotoRequirement(
            "overallSetting", "Overall Stone Setting",
            "Photos showing all stones from multiple angles",
            required=True, min_count=3, max_count=6,
        ),
        PhotoRequirement(
            "closeupStones", "Close-up of Key Stones",
            "Macro photos of center stone and important settings",
            required=True, min_count=2, max_count=4,
        ),
    ),
    tips=(
        "Verify stone sizes match settings before starting",
        "Set center/important stones first",
        "Check stone security after each setting",
    ),
    common_mistakes=(
        "Using incorrect burr size creating loose settings",
        "Over-tightening prongs causing stone damage",
    ),
)

_POLISH_2 = RequirementSchema(
    department=DepartmentKey.POLISH_2,
    title="Final Polish",
    description="Final polishing to achieve showroom-quality mirror finish",
    estimated_time="2-3 hours",
    required_tools=(
        "Fine Polishing Buffs",
        "Rouge",
        "Green Rouge",
        "Steam Cleaner",
        "Microfiber Cloth",
    ),
    form_fields=(
        FormField(
            name="polishingCompounds",
            label="Final Polishing Compounds Used",
            type=FieldType.SELECT,
            required=True,
            options=("Red Rouge", "Green Rouge", "White Diamond", "Combination"),
        ),
        FormField(
            name="finishType",
            label="Final Finish Type",
            type=FieldType.SELECT,
            required=True,
            options=("High Mirror", "Satin", "Brushed", "Mixed (Mirror + Brushed)"),
        ),
        FormField(
            name="timeSpent",
            label="Time Spent (minutes)",
            type=FieldType.NUMBER,
            required=True,
            min_value=15,
            max_value=300,
        ),
        FormField(
            name="stoneProtection",
            label="Stone Protection Used",
            type=FieldType.CHECKBOX,
            required=True,
        ),
        FormField(
            name="steamCleaning",
            label="Steam Cleaning Completed",
            type=FieldType.CHECKBOX,
            required=True,
        ),
        FormField(
            name="finalQuality",
            label="Final Quality Assessment",
            type=FieldType.SELECT,
            required=True,
            options=("Museum Quality", "Excellent", "Good", "Acceptable", "Needs Rework"),
        ),
        FormField(
            name="finalNotes",
            label="Final Polish Notes",
            type=FieldType.TEXTAREA,
            required=True,
            min_length=20,
            max_length=500,
        ),
    ),
    photo_requirements=(
        PhotoRequirement(
            "finalPolished", "Final Polished Piece",
            "Professional photos of the completed piece",
            required=True, min_count=4, max_count=8,
        ),
        PhotoRequirement(
            "detailShots", "Detail Shots", "Close-up showing polish quality and finish",
            required=True, min_count=2, max_count=4,
        ),
    ),
    tips=(
        "Use very light pressure for final polish",
        "Protect stones with masking or wax",
        "Handle with gloves after final polish",
    ),
    common_mistakes=(
        "Not protecting stones causing damage",
        "Touching polished surface with bare hands",
    ),
)

_ADDITIONAL = RequirementSchema(
    department=DepartmentKey.ADDITIONAL,
    title="Finishing Touch",
    description="Final inspection, hallmarking, packaging, and quality assurance",
    estimated_time="1-2 hours",
    required_tools=(
        "Loupe",
        "Scale",
        "Hallmarking Stamps",
        "Cleaning Solution",
        "Packaging Materials",
    ),
    form_fields=(
        FormField(
            name="finalWeight",
            label="Final Weight (grams)",
            type=FieldType.NUMBER,
            required=True,
            min_value=0.1,
            max_value=500,
            help_text="Accurate weight after all work completed",
        ),
        FormField(
            name="hallmarkApplied",
            label="Hallmark Applied",
            type=FieldType.CHECKBOX,
            required=True,
            help_text="BIS hallmark stamped (if required)",
        ),
        FormField(
            name="qualityGrade",
            label="Overall Quality Grade",
            type=FieldType.SELECT,
            required=True,
            options=(
                "A+ (Exceptional)",
                "A (Excellent)",
                "B+ (Very Good)",
                "B (Good)",
                "C (Acceptable)",
            ),
        ),
        FormField(
            name="defectsFound",
            label="Final Inspection - Defects Found",
            type=FieldType.SELECT,
            required=True,
            options=("None", "Minor", "Moderate", "Major"),
        ),
        FormField(
            name="defectDetails",
            label="Defect Details (If Any)",
            type=FieldType.TEXTAREA,
            max_length=500,
        ),
        FormField(
            name="customerSpecsMet",
            label="Customer Specifications Met",
            type=FieldType.CHECKBOX,
            required=True,
        ),
        FormField(
            name="packagingCompleted",
            label="Packaging Completed",
            type=FieldType.CHECKBOX,
            required=True,
        ),
        FormField(
            name="certificateGenerated",
            label="Certificate/Invoice Generated",
            type=FieldType.CHECKBOX,
        ),
        FormField(
            name="finalNotes",
            label="Final Inspection Notes",
            type=FieldType.TEXTAREA,
            required=True,
            min_length=30,
            max_length=800,
        ),
    ),
    photo_requirements=(
        PhotoRequirement(
            "finalProduct", "Final Product Photos",
            "Professional product photos from all angles",
            required=True, min_count=5, max_count=10,
        ),
        PhotoRequirement(
            "hallmarkPhoto", "Hallmark Photo", "Close-up of BIS hallmark",
            required=True, min_count=1, max_count=2,
        ),
        PhotoRequirement(
            "packagingPhoto", "Packaging Photo",
            "Photo of packaged piece ready for delivery",
            required=True, min_count=1, max_count=2,
        ),
    ),
    file_requirements=(
        FileRequirement(
            "certificate", "Certificate of Authenticity (PDF)",
            "Generated certificate document",
            required=False, accepted_formats=(".pdf",), max_size_mb=5,
        ),
    ),
    tips=(
        "Inspect under bright light and with loupe",
        "Verify weight matches expected range",
        "Document any variations from original specs",
    ),
    common_mistakes=(
        "Missing hallmark or incorrect stamp",
        "Inaccurate weight recording",
    ),
)

FULL_SCHEMAS: dict[DepartmentKey, RequirementSchema] = {
    schema.department: schema
    for schema in (
        _CAD,
        _PRINT,
        _CASTING,
        _FILLING,
        _MEENA,
        _POLISH_1,
        _SETTING,
        _POLISH_2,
        _ADDITIONAL,
    )
}

REDUCED_SCHEMAS: dict[DepartmentKey, RequirementSchema] = {
    DepartmentKey.PRINT: _PRINT_OUTSOURCED,
}


def resolve_department_key(value: DepartmentKey | str) -> DepartmentKey | None:
    """Accept a department key or a legacy config id (e.g. '3D_PRINTING')."""
    key = DepartmentKey.parse(value)
    if key is not None:
        return key
    wanted = str(value).strip().upper()
    for dept, config_id in CONFIG_IDS.items():
        if config_id == wanted:
            return dept
    return None
